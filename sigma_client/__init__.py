"""Async typed client for the Sigma identity lookup API."""

from .client import SigmaClient
from .exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodingError,
    NotAuthenticatedError,
    RequestTimeoutError,
    SigmaError,
    TransportError,
)
from .filters import Genero, Provincia, SearchFilters
from .transport import SigmaTransport


__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "DecodingError",
    "Genero",
    "NotAuthenticatedError",
    "Provincia",
    "RequestTimeoutError",
    "SearchFilters",
    "SigmaClient",
    "SigmaError",
    "SigmaTransport",
    "TransportError",
]
