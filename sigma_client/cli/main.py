"""Command line entry point for the Sigma client.

Each command logs in with credentials from the environment, runs one lookup
and prints the decoded records as JSON.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import typer
from loguru import logger
from pydantic import BaseModel
from rich.console import Console

from ..client import SigmaClient
from ..config.loader import get_config
from ..config.schemas import ClientConfig
from ..exceptions import SigmaError
from ..filters import Genero, Provincia, SearchFilters
from ..utils.logging_config import setup_logging
from .errors import handle_error


app = typer.Typer(
    name="sigma",
    help="Sigma identity lookup API client",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


@dataclass
class CommandContext:
    """Shared state for CLI commands."""

    config: ClientConfig
    console: Console


def _open_client(config: ClientConfig) -> SigmaClient:
    return SigmaClient(config.sigma)


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", exclude_none=True)
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def _run_lookup(ctx: typer.Context, call: Callable[[SigmaClient], Awaitable[Any]]) -> None:
    context: CommandContext = ctx.obj

    async def _runner() -> Any:
        client = _open_client(context.config)
        try:
            await client.login_from_env()
            return await call(client)
        finally:
            await client.aclose()

    try:
        result = asyncio.run(_runner())
    except SigmaError as e:
        logger.debug(f"Lookup failed: {e.to_dict()}")
        handle_error(e, context.console)
        return

    context.console.print_json(data=_to_jsonable(result))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Sigma identity lookup API client."""
    try:
        config = get_config()
    except SigmaError as e:
        handle_error(e, console)
        return

    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        format_type=config.logging.format,
        file_path=config.logging.file_path,
        include_timestamps=config.logging.include_timestamps,
    )
    ctx.obj = CommandContext(config=config, console=console)


@app.command()
def dni(ctx: typer.Context, dni: str = typer.Argument(..., help="DNI number")) -> None:
    """Standard DNI lookup."""
    _run_lookup(ctx, lambda client: client.search_standard_dni(dni))


@app.command()
def phones(ctx: typer.Context, dni: str = typer.Argument(..., help="DNI number")) -> None:
    """Phone numbers related to a DNI."""
    _run_lookup(ctx, lambda client: client.search_phones_by_dni(dni))


@app.command()
def plate(ctx: typer.Context, plate: str = typer.Argument(..., help="Vehicle plate")) -> None:
    """Ownership history of a vehicle plate."""
    _run_lookup(ctx, lambda client: client.search_plate(plate))


@app.command("plate-dni")
def plate_dni(ctx: typer.Context, dni: str = typer.Argument(..., help="DNI number")) -> None:
    """Vehicle transactions related to a DNI."""
    _run_lookup(ctx, lambda client: client.search_plate_by_dni(dni))


@app.command()
def leaks(ctx: typer.Context, query: str = typer.Argument(..., help="Search string")) -> None:
    """Leaked credentials matching a query."""
    _run_lookup(ctx, lambda client: client.search_leaks(query))


@app.command("dni-pro")
def dni_pro(
    ctx: typer.Context,
    dni: str = typer.Argument(..., help="DNI number"),
    gender: Genero = typer.Option(..., "--gender", "-g", help="Gender of the person"),
) -> None:
    """Professional DNI lookup."""
    _run_lookup(ctx, lambda client: client.search_profesional_dni(dni, gender))


@app.command()
def name(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Full or partial name"),
    provincia: Provincia | None = typer.Option(None, "--provincia", "-p", help="Province"),
    localidad: str | None = typer.Option(None, "--localidad", "-l", help="Locality"),
    edad_min: int | None = typer.Option(None, "--edad-min", help="Minimum age"),
    edad_max: int | None = typer.Option(None, "--edad-max", help="Maximum age"),
) -> None:
    """Name search (up to 10 matches)."""
    filters = SearchFilters(
        provincia=provincia,
        localidad=localidad,
        edad_minima=edad_min,
        edad_maxima=edad_max,
    )
    _run_lookup(ctx, lambda client: client.search_name(name, filters))


@app.command()
def movistar(ctx: typer.Context, number: str = typer.Argument(..., help="Phone number")) -> None:
    """Email registered for a Movistar line."""
    _run_lookup(ctx, lambda client: client.search_movistar_email(number))


@app.command()
def address(ctx: typer.Context, address: str = typer.Argument(..., help="Street address")) -> None:
    """People living at an address."""
    _run_lookup(ctx, lambda client: client.search_by_address(address))


@app.command()
def phone(ctx: typer.Context, number: str = typer.Argument(..., help="Phone number")) -> None:
    """Current and past owners of a phone number."""
    _run_lookup(ctx, lambda client: client.search_phone(number))


@app.command("phone-magic")
def phone_magic(
    ctx: typer.Context, number: str = typer.Argument(..., help="Phone number")
) -> None:
    """Owner of a heavily used personal number."""
    _run_lookup(ctx, lambda client: client.search_phone_magic(number))


@app.command()
def cbu(ctx: typer.Context, value: str = typer.Argument(..., help="CBU, CVU or alias")) -> None:
    """Owner of a bank account or alias."""
    _run_lookup(ctx, lambda client: client.search_cbu(value))


@app.command()
def email(ctx: typer.Context, email: str = typer.Argument(..., help="Email address")) -> None:
    """Owner of an email address."""
    _run_lookup(ctx, lambda client: client.search_email(email))


if __name__ == "__main__":
    app()
