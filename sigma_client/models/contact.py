"""Phone, email and credential records."""

from __future__ import annotations

from pydantic import Field

from .base import SigmaRecord


class PhoneNumber(SigmaRecord):
    """A phone line associated with a DNI."""

    numero: str = Field(..., description="Phone number")
    compania: str | None = Field(None, description="Carrier")
    titular: str | None = Field(None, description="Line holder name")
    dni: str | None = Field(None, description="Line holder DNI")


class PersonaFromNumero(SigmaRecord):
    """A current or past owner of a phone number."""

    nombre: str | None = Field(None, description="Owner full name")
    dni: str | None = Field(None, description="Owner DNI")
    numero: str | None = Field(None, description="Phone number")
    compania: str | None = Field(None, description="Carrier")


class PersonaFromNumeroMagic(SigmaRecord):
    """Owner of a heavily used personal number, including an email."""

    nombre: str | None = Field(None, description="Owner full name")
    dni: str | None = Field(None, description="Owner DNI")
    numero: str | None = Field(None, description="Phone number")
    email: str | None = Field(None, description="Owner email address")


class MovistarEmail(SigmaRecord):
    """Email registered for a Movistar line."""

    numero: str | None = Field(None, description="Phone number")
    email: str = Field(..., description="Registered email address")


class EmailResultados(SigmaRecord):
    """Owner of an email address."""

    email: str = Field(..., description="Searched email address")
    nombre: str | None = Field(None, description="Owner full name")


class BreachCredentials(SigmaRecord):
    """Email/password pair found in a data breach."""

    email: str = Field(..., description="Leaked email or username")
    password: str | None = Field(None, description="Leaked password")

    def __repr__(self) -> str:
        return f"BreachCredentials(email={self.email!r}, password=<redacted>)"
