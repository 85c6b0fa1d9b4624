"""Bank account alias (CBU/CVU) owner record."""

from __future__ import annotations

from pydantic import Field

from .base import SigmaRecord


class TitularCBU(SigmaRecord):
    """Owner of a CBU/CVU or alias."""

    nombre: str = Field(..., description="Account holder name")
    cuit: str | None = Field(None, description="Holder tax identifier")
    cbu: str | None = Field(None, description="22-digit CBU/CVU")
    alias: str | None = Field(None, description="Account alias")
    banco: str | None = Field(None, description="Bank or wallet name")
