"""Named-route registry and URL building.

Derives a name-indexed view of the route table on every call. Nothing is
cached: route tables are small and effectively static after startup, so
recomputing keeps the view consistent with late registrations.

Name collisions follow a last-registration-wins policy. Routes sharing a
name *and* URI merge their methods; a later route with a different URI
replaces the earlier entry. ``find_conflicts()`` reports the latter case.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from waypoint.errors import MissingRouteParameters
from waypoint.routing.route import CATCHALL, Route, SegmentKind

logger = logging.getLogger("waypoint.routing")


@dataclass(slots=True)
class NamedRoute:
    """One entry of the serialized route table.

    ``parameters`` is None for routes without placeholders. ``wheres``
    holds the catch-all matching hint and is None otherwise.
    """

    uri: str
    methods: list[str]
    parameters: list[str] | None = None
    wheres: dict[str, str] | None = None

    @classmethod
    def from_route(cls, route: Route) -> NamedRoute:
        return cls(
            uri=route.uri,
            methods=[route.method],
            parameters=route.parameters or None,
            wheres={CATCHALL: ".*"} if route.has_catchall else None,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "uri": self.uri,
            "methods": list(self.methods),
            "parameters": None if self.parameters is None else list(self.parameters),
            "wheres": None if self.wheres is None else dict(self.wheres),
        }


def build_index(routes: Iterable[Route]) -> dict[str, NamedRoute]:
    """Build the name -> NamedRoute index, in registration order.

    Same name, same URI: methods are merged (no duplicates, first-seen order).
    Same name, different URI: the later route replaces the entry.
    """
    index: dict[str, NamedRoute] = {}
    for route in routes:
        if not route.name:
            continue
        entry = NamedRoute.from_route(route)
        existing = index.get(route.name)
        if existing is None:
            index[route.name] = entry
        elif existing.uri == entry.uri:
            if route.method not in existing.methods:
                existing.methods.append(route.method)
        else:
            logger.debug(
                "Route name %r re-registered: %s replaces %s", route.name, entry.uri, existing.uri
            )
            index[route.name] = entry
    return index


def named_routes(routes: Iterable[Route]) -> dict[str, Route]:
    """Map each route name to the last route registered under it."""
    return {route.name: route for route in routes if route.name}


def find_conflicts(routes: Iterable[Route]) -> dict[str, list[str]]:
    """Names registered with more than one distinct URI.

    Returns name -> URIs ordered by their last registration, so the final
    URI is the one ``build_index()`` and ``resolve()`` use.
    """
    uris: dict[str, list[str]] = {}
    for route in routes:
        if not route.name:
            continue
        seen = uris.setdefault(route.name, [])
        if route.uri in seen:
            seen.remove(route.uri)
        seen.append(route.uri)
    return {name: found for name, found in uris.items() if len(found) > 1}


def build_path(route: Route, params: Iterable[object]) -> str:
    """Substitute *params* into *route*'s segments, left to right.

    Raises ``MissingRouteParameters`` if there are fewer params than
    parameter/wildcard segments. Extra params are ignored unless the
    route ends in a catch-all, which takes all of them.
    """
    remaining = [str(p) for p in params]
    given = len(remaining)
    parts: list[str] = []
    for seg in route.segments:
        match seg.kind:
            case SegmentKind.CONSTANT:
                parts.append(seg.value)
            case SegmentKind.PARAMETER | SegmentKind.WILDCARD:
                if not remaining:
                    raise MissingRouteParameters(
                        route.name or route.path, route.required_parameters, given
                    )
                parts.append(remaining.pop(0))
            case SegmentKind.CATCHALL:
                parts.append("/".join(remaining))
                remaining = []
    return "/" + "/".join(parts)


def resolve(routes: Iterable[Route], name: str, params: Iterable[object] = ()) -> str | None:
    """Build the path for the route named *name*.

    Returns None when no route has that name::

        resolve(table, "users.edit", [1])   # "/users/1/edit"
        resolve(table, "nonexistent")       # None
    """
    route = named_routes(routes).get(name)
    if route is None:
        return None
    return build_path(route, params)
