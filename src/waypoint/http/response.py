
"""Redirect responses for named routes.

Immutable by convention: ``Redirect`` is a frozen dataclass the host
framework turns into a ``Location`` response.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class RedirectType(IntEnum):
    """HTTP status used for a redirect.

    ``PERMANENT`` lets browsers cache the redirect. ``NORMAL`` forces the
    follow-up request to be a GET. ``TEMPORARY`` preserves the method and body.
    """

    PERMANENT = 301
    NORMAL = 303
    TEMPORARY = 307


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect response."""

    url: str
    status: int = RedirectType.NORMAL

    @property
    def location(self) -> tuple[str, str]:
        """The ``Location`` header pair for this redirect."""
        return ("Location", self.url)

    @property
    def is_permanent(self) -> bool:
        """True for statuses browsers may cache (301, 308)."""
        return self.status in (301, 308)

