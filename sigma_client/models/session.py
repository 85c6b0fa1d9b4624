"""Session state obtained from a successful login."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """Bearer token and subscription plan returned by ``POST /login``.

    Held by the transport only. A later login replaces the whole object.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    token: str = Field(..., min_length=1, description="Opaque bearer token")
    plan: str | None = Field(None, description="Subscription tier (standard, medium, profesional)")

    @property
    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def __repr__(self) -> str:
        return f"Session(plan={self.plan!r}, token=<redacted>)"

    __str__ = __repr__
