"""Shared base for records decoded from Sigma API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SigmaRecord(BaseModel):
    """Base model for every response record.

    Unknown keys are ignored so that additive changes on the remote side do not
    break decoding; numbers sent where text is expected (DNIs, phone numbers)
    are kept as strings.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )
