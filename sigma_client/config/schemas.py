"""Configuration schemas for the Sigma client."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from ..exceptions import ConfigurationError


class SigmaConfig(BaseModel):
    """Connection settings for the Sigma API."""

    base_url: str = Field(default="https://api.sigma.com.ar/v1", description="API base URL")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Per-request timeout")
    user_agent: str = Field(default="sigma-client/0.1.0", description="User-Agent header")
    username_env_var: str = Field(default="SIGMA_USERNAME", description="Env var with the username")
    password_env_var: str = Field(default="SIGMA_PASSWORD", description="Env var with the password")
    load_dotenv: bool = Field(default=True, description="Read a .env file before resolving credentials")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "text"
    file_path: str | None = None
    max_file_size_mb: int = 100
    backup_count: int = 5
    include_timestamps: bool = True

    @field_validator("format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        lowered = value.lower()
        if lowered in {"pretty", "text", "plain"}:
            return "text"
        if lowered in {"json", "structured"}:
            return "json"
        return value


class ClientConfig(BaseModel):
    """Root configuration object."""

    sigma: SigmaConfig = Field(default_factory=SigmaConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class SigmaCredentials(BaseModel):
    """Username/password pair resolved from the environment."""

    username: str
    password: str = Field(..., repr=False)

    @classmethod
    def from_env(cls, config: SigmaConfig) -> SigmaCredentials:
        """Read credentials from the env vars named in ``config``.

        Raises:
            ConfigurationError: If either variable is unset or empty
        """
        if config.load_dotenv:
            from dotenv import load_dotenv

            load_dotenv()

        username = os.getenv(config.username_env_var)
        password = os.getenv(config.password_env_var)
        missing = [
            name
            for name, value in (
                (config.username_env_var, username),
                (config.password_env_var, password),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Sigma credentials not found in environment: {', '.join(missing)}",
                config_key="sigma.credentials",
                operation="from_env",
                details={"missing_env_vars": missing},
            )
        return cls(username=username, password=password)


__all__ = ["ClientConfig", "LoggingConfig", "SigmaConfig", "SigmaCredentials"]
