"""Request origin detection.

Works out the scheme and host a client used to reach the app, honouring
reverse-proxy headers (``X-Forwarded-Proto``, ``X-Forwarded-Host``) before
falling back to ``Host`` and the server's own TLS configuration.
"""

from urllib.parse import urlsplit

from waypoint.errors import WaypointError
from waypoint.http.request import Request

# X-Forwarded-Proto values that mean the client connected over TLS
SECURE_PROTOS = frozenset({"https", "on", "ssl", "1"})


def is_secure(request: Request, *, tls: bool = False) -> bool:
    """True if the client connected over HTTPS.

    A forwarded-proto header is authoritative when present. Otherwise the
    server's TLS setting (*tls*) or the ASGI scheme decides.
    """
    proto = request.headers.get("x-forwarded-proto")
    if proto is not None:
        return proto.strip().lower() in SECURE_PROTOS
    return tls or request.scheme in ("https", "wss")


def host(request: Request) -> str | None:
    """The host the client addressed: ``X-Forwarded-Host``, then ``Host``."""
    return request.headers.first("x-forwarded-host", "host")


def origin(request: Request, *, tls: bool = False) -> str:
    """The request origin, e.g. ``https://example.com``.

    Uses the ``Origin`` header when the client sent one. Otherwise builds
    ``scheme://host``, using the ASGI server address when no host header
    is present.

    Raises:
        WaypointError: If neither headers nor the server address identify
            the host, or the host carries a malformed port.
    """
    explicit = request.headers.get("origin")
    if explicit:
        return _checked(explicit)

    scheme = "https" if is_secure(request, tls=tls) else "http"
    name = host(request)
    if name is None and request.server is not None:
        server_host, server_port = request.server
        name = server_host if server_port is None else f"{server_host}:{server_port}"
    if not name:
        msg = "Cannot determine the request host: no Host header and no server address."
        raise WaypointError(msg)
    return _checked(f"{scheme}://{name}")


def _checked(url: str) -> str:
    try:
        urlsplit(url).port
    except ValueError:
        msg = f"Invalid port in request origin {url!r}."
        raise WaypointError(msg) from None
    return url


def base_url(request: Request, *, tls: bool = False) -> str:
    """The origin without a trailing slash, suitable as a URL prefix."""
    return origin(request, tls=tls).rstrip("/")


def url_port(url: str) -> int | None:
    """The explicit port of *url*, or None when it has none or it is invalid."""
    try:
        return urlsplit(url).port
    except ValueError:
        return None
