"""Sample Sigma API payloads used across tests."""

from __future__ import annotations

from typing import Any


BASE_URL = "https://sigma.test/api"


def login_payload(token: str = "tok-123", plan: str = "profesional") -> dict[str, Any]:
    return {"token": token, "plan": plan}


def dni_standard_payload() -> dict[str, Any]:
    return {
        "dni": "4211928",
        "nombre": "Carlos",
        "apellido": "Perez",
        "fecha_nacimiento": "1961-03-14",
        "edad": 63,
        "cuit": "20-04211928-3",
        "direccion": "Niceto Vega 4500",
        "localidad": "Palermo",
        "provincia": "Capital Federal",
        "codigo_postal": "1414",
    }


def dni_profesional_payload() -> dict[str, Any]:
    return {
        "dni": "45938102",
        "nombre": "Juan",
        "apellido": "Gomez",
        "cuil": "20-45938102-5",
        "fecha_nacimiento": "2004-07-01",
        "fallecido": False,
        "ejemplar": "B",
        "fecha_emision": "2019-08-22",
        "domicilio": {
            "calle": "San Martin",
            "numero": "120",
            "piso": "3",
            "departamento": "A",
            "codigo_postal": "5400",
            "ciudad": "San Juan",
            "provincia": "San Juan",
            "pais": "Argentina",
        },
    }


def phone_numbers_payload() -> list[dict[str, Any]]:
    return [
        {"numero": "2645559925", "compania": "Movistar", "titular": "Juan Gomez", "dni": "41042191"},
        {"numero": "1158490291", "compania": "Claro", "titular": "Juan Gomez", "dni": "41042191"},
    ]


def plate_history_payload() -> list[dict[str, Any]]:
    return [
        {
            "dominio": "AB123CD",
            "marca": "Fiat",
            "modelo": "Cronos",
            "anio": 2019,
            "tipo_titular": "persona",
            "titular": "Maria Lopez",
            "documento": "24546048",
            "fecha_transaccion": "2019-05-02",
        },
        {
            "dominio": "AB123CD",
            "marca": "Fiat",
            "modelo": "Cronos",
            "anio": 2019,
            "tipo_titular": "empresa",
            "titular": "Autos del Sur SA",
            "documento": "30-71234567-9",
            "fecha_transaccion": "2021-11-18",
        },
    ]


def breach_payload() -> list[dict[str, Any]]:
    return [
        {"email": "jdoe@cronica.example", "password": "hunter2"},
        {"email": "admin@cronica.example", "password": "123456"},
    ]


def name_search_payload() -> dict[str, Any]:
    return {
        "resultados": [
            {"dni": "20111222", "nombre": "Carlos Perez", "edad": 44, "provincia": "Chaco", "localidad": "Resistencia"},
        ]
    }
