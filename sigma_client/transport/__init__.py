"""
HTTP transport for the Sigma API.

Module Structure:
- client: SigmaTransport, an async HTTPX client holding the login session

Exported Classes:
- SigmaTransport: One coroutine per remote endpoint
"""

from __future__ import annotations

from .client import DEFAULT_BASE_URL, SigmaTransport


__all__ = ["DEFAULT_BASE_URL", "SigmaTransport"]
