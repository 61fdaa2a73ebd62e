"""Waypoint configuration.

WaypointConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from waypoint.errors import ConfigurationError
from waypoint.http.response import RedirectType


@dataclass(frozen=True, slots=True)
class WaypointConfig:
    """Waypoint configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = WaypointConfig(js_global="Routes", strict_names=True)
    """

    # Template integration: name of the JS constant holding the route table
    js_global: str = "Ziggy"

    # TLS (optional): when set, requests without X-Forwarded-Proto are https
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    # Raise instead of warn when one name is registered with several URIs
    strict_names: bool = False

    # Default status family for Waypoint.redirect()
    redirect_type: RedirectType = RedirectType.NORMAL

    def __post_init__(self) -> None:
        if not self.js_global.replace("$", "_").isidentifier():
            msg = f"js_global must be a valid JavaScript identifier, got {self.js_global!r}"
            raise ConfigurationError(msg)

    @property
    def tls(self) -> bool:
        """True when the server is configured to terminate TLS itself."""
        return self.ssl_certfile is not None
