"""Async HTTP transport for the Sigma lookup API.

This module owns the HTTPX connection and the login session. It exposes one
coroutine per remote endpoint, attaches the bearer token to every request
except login, and decodes each JSON payload into a typed record.

No retries, rate limiting or caching are performed: every failure is raised
to the caller as a SigmaError subclass.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from ..config.schemas import SigmaConfig
from ..exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    DecodingError,
    NotAuthenticatedError,
    RequestTimeoutError,
    TransportError,
)
from ..filters import Genero, SearchFilters, encode_filters, encode_genero
from ..models import (
    BreachCredentials,
    DNIProfesional,
    DNIStandardResponse,
    EmailResultados,
    MovistarEmail,
    PersonaDireccion,
    PersonaFromNumero,
    PersonaFromNumeroMagic,
    PersonaNombre,
    PhoneNumber,
    PlateHistory,
    Session,
    TitularCBU,
)


RecordT = TypeVar("RecordT", bound=BaseModel)

API_NAME = "sigma"
DEFAULT_BASE_URL = "https://api.sigma.com.ar/v1"
LIST_ENVELOPE_KEY = "resultados"
AUTH_REJECTION_STATUSES = (401, 403)


class SigmaTransport:
    """Async client for the Sigma HTTP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        *,
        user_agent: str = "sigma-client/0.1.0",
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the transport.

        Args:
            base_url: Root URL of the Sigma API
            timeout: Per-request timeout in seconds
            user_agent: Value of the User-Agent header
            http_client: Optional pre-configured HTTPX client (useful for tests).
                A client passed in here is not closed by ``aclose()``.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._session: Session | None = None
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

        logger.info(f"Initialized SigmaTransport: base_url={self.base_url}")

    @classmethod
    def from_config(
        cls, config: SigmaConfig, *, http_client: httpx.AsyncClient | None = None
    ) -> SigmaTransport:
        return cls(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def plan(self) -> str | None:
        return self._session.plan if self._session else None

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def _auth_headers(self, operation: str) -> dict[str, str]:
        session = self._session
        if session is None:
            raise NotAuthenticatedError(operation=operation)
        return session.authorization_header

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        *,
        operation: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint path (relative to base_url)
            operation: Name of the calling operation, used in errors
            params: Query parameters
            json_body: JSON request body
            authenticated: Attach the session bearer token

        Raises:
            NotAuthenticatedError: If authenticated and no session exists
            AuthenticationError: If login is rejected with 401/403
            AuthorizationError: If a lookup is rejected with 401/403
            APIError: For any other non-2xx status
            RequestTimeoutError: If the request times out
            TransportError: For connectivity or TLS failures
            DecodingError: If the body is not valid JSON
        """
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if authenticated:
            headers.update(self._auth_headers(operation))

        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"Sigma API request timed out: {e}",
                endpoint=endpoint,
                operation=operation,
                cause=e,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Sigma API request error: {e}",
                endpoint=endpoint,
                operation=operation,
                cause=e,
            ) from e

        logger.debug(f"{method} {endpoint} -> {response.status_code}")

        if not response.is_success:
            self._raise_for_status(response, endpoint, operation, authenticated)

        try:
            return response.json()
        except ValueError as e:
            raise DecodingError(
                f"Sigma API returned malformed JSON: {e}",
                endpoint=endpoint,
                operation=operation,
                cause=e,
            ) from e

    @staticmethod
    def _raise_for_status(
        response: httpx.Response, endpoint: str, operation: str, authenticated: bool
    ) -> None:
        status = response.status_code
        kwargs: dict[str, Any] = {
            "api_name": API_NAME,
            "endpoint": endpoint,
            "http_status": status,
            "response_text": response.text,
            "operation": operation,
        }
        if status in AUTH_REJECTION_STATUSES:
            if not authenticated:
                raise AuthenticationError(f"Sigma API login rejected: HTTP {status}", **kwargs)
            raise AuthorizationError(f"Sigma API denied access: HTTP {status}", **kwargs)
        raise APIError(f"Sigma API request failed: HTTP {status}", **kwargs)

    @staticmethod
    def _decode(payload: Any, model: type[RecordT], endpoint: str, operation: str) -> RecordT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DecodingError(
                f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)",
                endpoint=endpoint,
                model=model.__name__,
                operation=operation,
                cause=e,
            ) from e

    @classmethod
    def _decode_list(
        cls, payload: Any, model: type[RecordT], endpoint: str, operation: str
    ) -> list[RecordT]:
        if isinstance(payload, dict) and isinstance(payload.get(LIST_ENVELOPE_KEY), list):
            payload = payload[LIST_ENVELOPE_KEY]
        if not isinstance(payload, list):
            raise DecodingError(
                f"Expected a list of {model.__name__}, got {type(payload).__name__}",
                endpoint=endpoint,
                model=model.__name__,
                operation=operation,
            )
        return [cls._decode(item, model, endpoint, operation) for item in payload]

    async def _get_one(
        self, endpoint: str, params: dict[str, str], model: type[RecordT], operation: str
    ) -> RecordT:
        payload = await self._make_request("GET", endpoint, operation=operation, params=params)
        return self._decode(payload, model, endpoint, operation)

    async def _get_many(
        self, endpoint: str, params: dict[str, str], model: type[RecordT], operation: str
    ) -> list[RecordT]:
        payload = await self._make_request("GET", endpoint, operation=operation, params=params)
        return self._decode_list(payload, model, endpoint, operation)

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def login_with_credentials(self, username: str, password: str) -> Session:
        """Authenticate and store the returned token and plan.

        A failed login leaves any previous session in place.
        """
        endpoint = "/login"
        payload = await self._make_request(
            "POST",
            endpoint,
            operation="login_with_credentials",
            json_body={"username": username, "password": password},
            authenticated=False,
        )
        session = self._decode(payload, Session, endpoint, "login_with_credentials")
        self._session = session
        logger.info(f"Logged in to Sigma API (plan={session.plan})")
        return session

    async def get_data_from_dni(self, dni: str) -> DNIStandardResponse:
        return await self._get_one(
            "/dni/standard", {"dni": dni}, DNIStandardResponse, "get_data_from_dni"
        )

    async def get_phones_from_dni(self, dni: str) -> list[PhoneNumber]:
        return await self._get_many(
            "/dni/telefonos", {"dni": dni}, PhoneNumber, "get_phones_from_dni"
        )

    async def get_plate(self, plate: str) -> list[PlateHistory]:
        return await self._get_many("/patente", {"dominio": plate}, PlateHistory, "get_plate")

    async def get_plate_from_dni(self, dni: str) -> list[PlateHistory]:
        return await self._get_many(
            "/patente/dni", {"dni": dni}, PlateHistory, "get_plate_from_dni"
        )

    async def get_query_data_breach(self, query: str) -> list[BreachCredentials]:
        return await self._get_many(
            "/leaks", {"query": query}, BreachCredentials, "get_query_data_breach"
        )

    async def get_data_from_dni_profesional(self, dni: str, genero: Genero) -> DNIProfesional:
        return await self._get_one(
            "/dni/profesional",
            {"dni": dni, "genero": encode_genero(genero)},
            DNIProfesional,
            "get_data_from_dni_profesional",
        )

    async def get_names(
        self, nombre: str, filters: SearchFilters | None = None
    ) -> list[PersonaNombre]:
        params = {"nombre": nombre}
        params.update(encode_filters(filters))
        return await self._get_many("/nombre", params, PersonaNombre, "get_names")

    async def get_movistar_email(self, numero: str) -> MovistarEmail:
        return await self._get_one(
            "/movistar/email", {"numero": numero}, MovistarEmail, "get_movistar_email"
        )

    async def get_people_by_address(self, direccion: str) -> list[PersonaDireccion]:
        return await self._get_many(
            "/direccion", {"direccion": direccion}, PersonaDireccion, "get_people_by_address"
        )

    async def get_data_by_number(self, numero: str) -> list[PersonaFromNumero]:
        return await self._get_many(
            "/telefono", {"numero": numero}, PersonaFromNumero, "get_data_by_number"
        )

    async def get_data_by_number_magic(self, numero: str) -> PersonaFromNumeroMagic:
        return await self._get_one(
            "/telefono/magic",
            {"numero": numero},
            PersonaFromNumeroMagic,
            "get_data_by_number_magic",
        )

    async def get_data_by_cvu(self, cvu_o_alias: str) -> TitularCBU:
        return await self._get_one("/cbu", {"cbu": cvu_o_alias}, TitularCBU, "get_data_by_cvu")

    async def get_data_by_email(self, email: str) -> EmailResultados:
        return await self._get_one(
            "/email", {"email": email}, EmailResultados, "get_data_by_email"
        )
