"""Route table serialization for client-side URL building.

Produces the document the Ziggy client library expects::

    {
      "url": "https://example.com",
      "port": null,
      "routes": {"users.edit": {"uri": "users/{id}/edit", "methods": ["GET"],
                                "parameters": ["id"], "wheres": null}},
      "defaults": {}
    }
"""

import json
from collections.abc import Iterable
from typing import Any

from waypoint.http.origin import url_port
from waypoint.registry import build_index
from waypoint.routing.route import Route


def to_document(routes: Iterable[Route], base_url: str) -> dict[str, Any]:
    """Build the serializable route document for *base_url*."""
    return {
        "url": base_url,
        "port": url_port(base_url),
        "routes": {name: entry.to_dict() for name, entry in build_index(routes).items()},
        "defaults": {},
    }


def serialize(routes: Iterable[Route], base_url: str) -> str:
    """Serialize the named-route table as compact JSON."""
    return json.dumps(to_document(routes, base_url), separators=(",", ":"))


def script_safe(json_text: str) -> str:
    """Make JSON safe to inline in a ``<script>`` element.

    Escapes ``</`` so a route string cannot close the element early, and
    ``<!--`` so it cannot open an HTML comment inside it. The result is
    still valid JSON.
    """
    return json_text.replace("</", "<\\/").replace("<!--", "<\\u0021--")
