"""Immutable HTTP request.

Frozen metadata built from an ASGI scope. Waypoint only reads the parts
that identify where the request was sent: headers, scheme and server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from waypoint.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata is frozen at creation. There is no body access; the host
    framework owns transport.
    """

    headers: Headers
    scheme: str = "http"
    server: tuple[str, int | None] | None = None

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        return cls(
            headers=Headers(tuple(scope.get("headers", ()))),
            scheme=scope.get("scheme", "http"),
            server=tuple(server) if server else None,
        )
