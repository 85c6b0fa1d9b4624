"""Public client for the Sigma lookup API.

Typical usage::

    async with SigmaClient() as client:
        await client.login("username", "password")
        person = await client.search_standard_dni("4211928")

Plan tiers are enforced by the remote service; lookups outside the account's
plan raise AuthorizationError.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from .config.loader import get_config
from .config.schemas import SigmaConfig, SigmaCredentials
from .filters import Genero, SearchFilters
from .models import (
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
    TitularCBU,
)
from .transport import SigmaTransport


class SigmaClient:
    """Façade exposing one coroutine per Sigma lookup."""

    def __init__(
        self,
        config: SigmaConfig | None = None,
        *,
        transport: SigmaTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            config: Connection settings. If None, loads from get_config()
            transport: Pre-built transport (takes precedence over config)
            http_client: Optional HTTPX client handed to the transport
        """
        if config is None:
            config = get_config().sigma
        self.config = config
        self._transport = transport or SigmaTransport.from_config(config, http_client=http_client)

    @classmethod
    async def from_env(cls, config: SigmaConfig | None = None, **kwargs: Any) -> SigmaClient:
        """Build a client and log in with credentials from the environment."""
        client = cls(config, **kwargs)
        try:
            await client.login_from_env()
        except Exception:
            await client.aclose()
            raise
        return client

    async def __aenter__(self) -> SigmaClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    @property
    def is_authenticated(self) -> bool:
        return self._transport.is_authenticated

    @property
    def plan(self) -> str | None:
        """Subscription plan reported by the last successful login."""
        return self._transport.plan

    async def login(self, username: str, password: str) -> None:
        """Log in using username and password credentials.

        The token and plan from the response are stored inside the client for
        further requests. Call this before any lookup; calling it again
        replaces the stored token.

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        await self._transport.login_with_credentials(username, password)

    login_with_credentials = login

    async def login_from_env(self) -> None:
        """Log in with the credentials named in the configuration."""
        credentials = SigmaCredentials.from_env(self.config)
        logger.debug(f"Logging in as {credentials.username}")
        await self.login(credentials.username, credentials.password)

    async def search_standard_dni(self, dni: str) -> DNIStandardResponse:
        """Search for a person by their DNI.

        Standard plan or higher.
        """
        return await self._transport.get_data_from_dni(dni)

    async def search_phones_by_dni(self, dni: str) -> list[PhoneNumber]:
        """Return every phone number related to a DNI.

        Standard plan or higher.
        """
        return await self._transport.get_phones_from_dni(dni)

    async def search_plate(self, plate: str) -> list[PlateHistory]:
        """Return every ownership transaction of a vehicle plate.

        Holders can be people or organizations. Medium plan or higher.
        """
        return await self._transport.get_plate(plate)

    async def search_plate_by_dni(self, dni: str) -> list[PlateHistory]:
        """Return transactions of vehicles owned by or related to a DNI.

        Medium plan or higher.
        """
        return await self._transport.get_plate_from_dni(dni)

    async def search_leaks(self, query: str) -> list[BreachCredentials]:
        """Search leaked email/password pairs matching a query string.

        Medium plan or higher.
        """
        return await self._transport.get_query_data_breach(query)

    async def search_profesional_dni(self, dni: str, gender: Genero) -> DNIProfesional:
        """Search for a person by DNI in the high quality registry.

        The gender of the person is mandatory. Professional plan.
        """
        return await self._transport.get_data_from_dni_profesional(dni, gender)

    async def search_name(
        self, name: str, filters: SearchFilters | None = None
    ) -> list[PersonaNombre]:
        """Search people by name, returning at most 10 matches.

        Province, locality and age range can narrow the search. Professional plan.

        Example:
            filters = SearchFilters(provincia=Provincia.BUENOS_AIRES, edad_minima=20)
            results = await client.search_name("Carlos", filters)
        """
        return await self._transport.get_names(name, filters)

    async def search_movistar_email(self, number: str) -> MovistarEmail:
        """Return the email registered for a Movistar phone line. Professional plan."""
        return await self._transport.get_movistar_email(number)

    async def search_by_address(self, address: str) -> list[PersonaDireccion]:
        """Return the people living at an address with their numbers and carriers.

        Professional plan.
        """
        return await self._transport.get_people_by_address(address)

    async def search_phone(self, number: str) -> list[PersonaFromNumero]:
        """Return the people that owned or own a phone number. Professional plan."""
        return await self._transport.get_data_by_number(number)

    async def search_phone_magic(self, number: str) -> PersonaFromNumeroMagic:
        """Look a number up on the special endpoint, which may include an email.

        A result means the number is heavily used for personal matters.
        Professional plan.
        """
        return await self._transport.get_data_by_number_magic(number)

    async def search_cbu(self, cvu_or_alias: str) -> TitularCBU:
        """Return the owner of a CBU/CVU or alias. Professional plan."""
        return await self._transport.get_data_by_cvu(cvu_or_alias)

    async def search_email(self, email: str) -> EmailResultados:
        """Return the owner's name for an email address. Professional plan."""
        return await self._transport.get_data_by_email(email)
