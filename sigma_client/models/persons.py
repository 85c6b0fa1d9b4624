"""Person records returned by the DNI, name and address lookups."""

from __future__ import annotations

from pydantic import Field

from .base import SigmaRecord


class DNIStandardResponse(SigmaRecord):
    """Person record from the standard DNI lookup (``/dni/standard``)."""

    dni: str = Field(..., description="National identity document number")
    nombre: str | None = Field(None, description="First name(s)")
    apellido: str | None = Field(None, description="Last name(s)")
    fecha_nacimiento: str | None = Field(None, description="Birth date as sent by the API")
    edad: int | None = Field(None, description="Age in years")
    cuit: str | None = Field(None, description="Tax identifier (CUIT/CUIL)")
    direccion: str | None = Field(None, description="Registered street address")
    localidad: str | None = Field(None, description="Locality")
    provincia: str | None = Field(None, description="Province name")
    codigo_postal: str | None = Field(None, description="Postal code")


class Domicilio(SigmaRecord):
    """Address block nested in the professional DNI record."""

    calle: str | None = None
    numero: str | None = None
    piso: str | None = None
    departamento: str | None = None
    codigo_postal: str | None = None
    barrio: str | None = None
    ciudad: str | None = None
    municipio: str | None = None
    provincia: str | None = None
    pais: str | None = None


class DNIProfesional(SigmaRecord):
    """Extended person record from the professional DNI lookup.

    Sourced from a higher quality registry than the standard lookup, so it
    includes document issue data and a structured address.
    """

    dni: str = Field(..., description="National identity document number")
    nombre: str | None = Field(None, description="First name(s)")
    apellido: str | None = Field(None, description="Last name(s)")
    cuil: str | None = Field(None, description="Labour identifier (CUIL)")
    fecha_nacimiento: str | None = Field(None, description="Birth date as sent by the API")
    fallecido: bool | None = Field(None, description="Whether the person is registered as deceased")
    ejemplar: str | None = Field(None, description="Document copy letter (A, B, C...)")
    fecha_emision: str | None = Field(None, description="Document issue date")
    domicilio: Domicilio | None = Field(None, description="Registered address")


class PersonaNombre(SigmaRecord):
    """One match from the name search (at most 10 per query)."""

    dni: str = Field(..., description="National identity document number")
    nombre: str | None = Field(None, description="Full name")
    edad: int | None = Field(None, description="Age in years")
    provincia: str | None = Field(None, description="Province name")
    localidad: str | None = Field(None, description="Locality")


class PersonaDireccion(SigmaRecord):
    """A person registered at the searched address."""

    nombre: str | None = Field(None, description="Full name")
    dni: str | None = Field(None, description="National identity document number")
    direccion: str | None = Field(None, description="Matched address")
    numero: str | None = Field(None, description="Phone number")
    compania: str | None = Field(None, description="Phone carrier")
