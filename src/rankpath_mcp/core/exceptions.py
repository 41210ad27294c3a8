"""Errors raised by the RankPath API client.

Every failure collapses to one human-readable line (``str(exc)``) at the tool
boundary, but the class still tells callers what went wrong.
"""

from __future__ import annotations

from typing import Optional


class RankPathError(Exception):
    """Base class for all client failures."""


class RankPathAPIError(RankPathError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, error: str, message: Optional[str] = None):
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(f"{error}: {message or ''}")


class RankPathNotFoundError(RankPathAPIError):
    """Upstream answered 404."""


class RankPathTransportError(RankPathError):
    """The request never produced an HTTP response (network, TLS, timeout)."""


class RankPathParseError(RankPathError):
    """A 2xx response whose body is not the expected JSON shape."""
