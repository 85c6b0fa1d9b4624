"""Error formatting and display utilities."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    SigmaError,
    TransportError,
)


def suggestions_for(error: Exception) -> list[str]:
    """Return troubleshooting hints for a known error type."""
    if isinstance(error, ConfigurationError):
        return [
            "Set SIGMA_USERNAME and SIGMA_PASSWORD (or add them to .env)",
            "Verify config/base.yaml syntax and SIGMA__* overrides",
        ]
    if isinstance(error, AuthenticationError):
        return ["Check the Sigma username and password"]
    if isinstance(error, AuthorizationError):
        return ["This lookup may require a higher subscription plan"]
    if isinstance(error, TransportError):
        return ["Check network connectivity", "Verify sigma.base_url in config/base.yaml"]
    return []


def format_error(error: Exception) -> Panel:
    """Format an error for Rich display."""
    error_text = Text()
    error_text.append("✗ ", style="bold red")
    error_text.append(error.message if isinstance(error, SigmaError) else str(error), style="red")
    error_text.append(f"\n\nType: {type(error).__name__}", style="dim")

    suggestions = suggestions_for(error)
    if suggestions:
        suggestion_text = Text("\n\nSuggested fixes:", style="bold yellow")
        for i, suggestion in enumerate(suggestions, 1):
            suggestion_text.append(f"\n  {i}. {suggestion}", style="yellow")
        error_text.append(suggestion_text)

    return Panel(error_text, title="Error", border_style="red")


def handle_error(error: Exception, console: Console) -> None:
    """Display an error and exit (2 for configuration errors, 1 otherwise)."""
    console.print(format_error(error))
    code = 2 if isinstance(error, ConfigurationError) else 1
    raise typer.Exit(code=code)
