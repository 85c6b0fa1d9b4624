"""Vehicle plate history records."""

from __future__ import annotations

from pydantic import Field

from .base import SigmaRecord


class PlateHistory(SigmaRecord):
    """One ownership transaction of a vehicle.

    The holder can be a person (``documento`` is a DNI) or an organization
    (``documento`` is a CUIT).
    """

    dominio: str = Field(..., description="Vehicle plate")
    marca: str | None = Field(None, description="Make")
    modelo: str | None = Field(None, description="Model")
    anio: int | None = Field(None, description="Model year")
    tipo_titular: str | None = Field(None, description="Holder type (persona or empresa)")
    titular: str | None = Field(None, description="Holder name")
    documento: str | None = Field(None, description="Holder DNI or CUIT")
    fecha_transaccion: str | None = Field(None, description="Transaction date as sent by the API")
