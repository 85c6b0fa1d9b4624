"""Search filters and categorical codes sent to the Sigma API.

The province and gender codes are part of the remote contract. They are kept in
explicit lookup tables rather than derived from enum ordering, because the
province codes are non-contiguous (15 is unused) and must be sent verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Provincia(str, Enum):
    """Argentine provinces accepted by the name search filter."""

    CAPITAL_FEDERAL = "CapitalFederal"
    BUENOS_AIRES = "BuenosAires"
    CATAMARCA = "Catamarca"
    CHACO = "Chaco"
    CHUBUT = "Chubut"
    CORDOBA = "Cordoba"
    CORRIENTES = "Corrientes"
    ENTRE_RIOS = "EntreRios"
    FORMOSA = "Formosa"
    JUJUY = "Jujuy"
    LA_PAMPA = "LaPampa"
    LA_RIOJA = "LaRioja"
    MENDOZA = "Mendoza"
    MISIONES = "Misiones"
    NEUQUEN = "Neuquen"
    RIO_NEGRO = "RioNegro"
    SALTA = "Salta"
    SAN_JUAN = "SanJuan"
    SAN_LUIS = "SanLuis"
    SANTA_CRUZ = "SantaCruz"
    SANTA_FE = "SantaFe"
    SANTIAGO_DEL_ESTERO = "SantiagoDelEstero"
    TIERRA_DEL_FUEGO = "TierraDelFuego"
    TUCUMAN = "Tucuman"


class Genero(str, Enum):
    """Gender values required by the professional DNI lookup."""

    MASCULINO = "Masculino"
    FEMENINO = "Femenino"
    OTRO = "Otro"


PROVINCIA_CODES: dict[Provincia, int] = {
    Provincia.CAPITAL_FEDERAL: 0,
    Provincia.BUENOS_AIRES: 1,
    Provincia.CATAMARCA: 2,
    Provincia.CORDOBA: 3,
    Provincia.CORRIENTES: 4,
    Provincia.ENTRE_RIOS: 5,
    Provincia.JUJUY: 6,
    Provincia.MENDOZA: 7,
    Provincia.LA_RIOJA: 8,
    Provincia.SALTA: 9,
    Provincia.SAN_JUAN: 10,
    Provincia.SAN_LUIS: 11,
    Provincia.SANTA_FE: 12,
    Provincia.SANTIAGO_DEL_ESTERO: 13,
    Provincia.TUCUMAN: 14,
    Provincia.CHACO: 16,
    Provincia.CHUBUT: 17,
    Provincia.FORMOSA: 18,
    Provincia.MISIONES: 19,
    Provincia.NEUQUEN: 20,
    Provincia.LA_PAMPA: 21,
    Provincia.RIO_NEGRO: 22,
    Provincia.SANTA_CRUZ: 23,
    Provincia.TIERRA_DEL_FUEGO: 24,
}

GENERO_CODES: dict[Genero, int] = {
    Genero.MASCULINO: 0,
    Genero.FEMENINO: 1,
    Genero.OTRO: 2,
}

# Query parameter names understood by the /nombre endpoint
PARAM_PROVINCIA = "provincia_nombre"
PARAM_LOCALIDAD = "localidad"
PARAM_EDAD_MINIMA = "edad_desde"
PARAM_EDAD_MAXIMA = "edad_hasta"


def encode_provincia(provincia: Provincia) -> str:
    """Return the wire code for a province, e.g. ``Provincia.CHACO`` -> ``"16"``."""
    return str(PROVINCIA_CODES[Provincia(provincia)])


def encode_genero(genero: Genero) -> str:
    """Return the wire code for a gender, e.g. ``Genero.FEMENINO`` -> ``"1"``."""
    return str(GENERO_CODES[Genero(genero)])


@dataclass
class SearchFilters:
    """Optional filters for the name search.

    Every field defaults to unset (None) and unset fields are left out of the
    request individually.

    Example:
        filters = SearchFilters()
        filters.set_provincia(Provincia.BUENOS_AIRES)
        filters.set_edad_minima(20)
        filters.to_params()  # {"provincia_nombre": "1", "edad_desde": "20"}
    """

    provincia: Provincia | None = None
    localidad: str | None = None
    edad_minima: int | None = None
    edad_maxima: int | None = None

    def set_provincia(self, provincia: Provincia) -> SearchFilters:
        self.provincia = provincia
        return self

    def set_localidad(self, localidad: str) -> SearchFilters:
        self.localidad = localidad
        return self

    def set_edad_minima(self, edad_minima: int) -> SearchFilters:
        self.edad_minima = edad_minima
        return self

    def set_edad_maxima(self, edad_maxima: int) -> SearchFilters:
        self.edad_maxima = edad_maxima
        return self

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.provincia is not None:
            params[PARAM_PROVINCIA] = encode_provincia(self.provincia)
        if self.localidad is not None:
            params[PARAM_LOCALIDAD] = self.localidad
        if self.edad_minima is not None:
            params[PARAM_EDAD_MINIMA] = str(self.edad_minima)
        if self.edad_maxima is not None:
            params[PARAM_EDAD_MAXIMA] = str(self.edad_maxima)
        return params


def encode_filters(filters: SearchFilters | None) -> dict[str, str]:
    """Encode filters into query parameters; None yields an empty mapping."""
    return (filters or SearchFilters()).to_params()


__all__ = [
    "GENERO_CODES",
    "Genero",
    "PROVINCIA_CODES",
    "Provincia",
    "SearchFilters",
    "encode_filters",
    "encode_genero",
    "encode_provincia",
]
