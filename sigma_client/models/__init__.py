"""Typed records decoded from Sigma API responses."""

from .banking import TitularCBU
from .base import SigmaRecord
from .contact import (
    BreachCredentials,
    EmailResultados,
    MovistarEmail,
    PersonaFromNumero,
    PersonaFromNumeroMagic,
    PhoneNumber,
)
from .persons import (
    DNIProfesional,
    DNIStandardResponse,
    Domicilio,
    PersonaDireccion,
    PersonaNombre,
)
from .session import Session
from .vehicle import PlateHistory


__all__ = [
    "BreachCredentials",
    "DNIProfesional",
    "DNIStandardResponse",
    "Domicilio",
    "EmailResultados",
    "MovistarEmail",
    "PersonaDireccion",
    "PersonaFromNumero",
    "PersonaFromNumeroMagic",
    "PersonaNombre",
    "PhoneNumber",
    "PlateHistory",
    "Session",
    "SigmaRecord",
    "TitularCBU",
]
