# sigma-client/tests/conftest.py
#
# Test bootstrap for pytest: ensure repository root is on sys.path so tests can import
# the `sigma_client` package without an editable install, and register markers.
#
# Fixture Organization:
# - This file: Core fixtures (repo_root, base URL, transports, logging capture)
# - tests/utils/fixtures.py: Sample API payloads
# - tests/utils/exception_helpers.py: Assertions for structured exceptions
#
from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import httpx
import pytest
from loguru import logger


_repo_root = Path(__file__).resolve().parents[1]
_repo_root_str = str(_repo_root)

if _repo_root_str not in sys.path:
    sys.path.insert(0, _repo_root_str)

from sigma_client.config import SigmaConfig, reload_config  # noqa: E402
from sigma_client.models import Session  # noqa: E402
from sigma_client.transport import SigmaTransport  # noqa: E402
from tests.utils.fixtures import BASE_URL  # noqa: E402

logger.remove()
logger.add(
    sys.stderr,
    level="INFO",
    format="{time:YYYY-MM-DD HH:mm:ss} {level} {name}: {message}",
)


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "fast: Fast unit tests that should complete in < 1 second",
    )
    config.addinivalue_line(
        "markers",
        "integration: Tests that call the live Sigma API (need SIGMA_USERNAME/SIGMA_PASSWORD)",
    )


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return _repo_root


@pytest.fixture(autouse=True)
def _fresh_config() -> Iterator[None]:
    """Clear the cached configuration around every test."""
    reload_config()
    yield
    reload_config()


@pytest.fixture
def sigma_config() -> SigmaConfig:
    return SigmaConfig(base_url=BASE_URL, timeout_seconds=5, load_dotenv=False)


@pytest.fixture
def transport() -> SigmaTransport:
    """Unauthenticated transport backed by a real HTTPX client (mock it with respx)."""
    return SigmaTransport(base_url=BASE_URL, timeout=5.0, http_client=httpx.AsyncClient())


@pytest.fixture
def authed_transport(transport: SigmaTransport) -> SigmaTransport:
    transport._session = Session(token="tok-123", plan="profesional")
    return transport


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
