"""Waypoint — named routes for server code and templates.

Wraps a live ``RouteTable`` and exposes URL building, route-table
serialization, template helpers and redirects by route name.
"""

from __future__ import annotations

import logging

from kida import Environment
from kida.template import Markup

from waypoint.config import WaypointConfig
from waypoint.errors import ConfigurationError
from waypoint.http.origin import base_url
from waypoint.http.request import Request
from waypoint.http.response import Redirect, RedirectType
from waypoint.registry import NamedRoute, build_index, find_conflicts, named_routes, resolve
from waypoint.routing.route import Route
from waypoint.routing.table import RouteTable
from waypoint.serialization import script_safe, serialize, to_document
from waypoint.templating.integration import register_globals, routes_script

logger = logging.getLogger("waypoint.routing")


class Waypoint:
    """Named-route access for a route table.

    Every call reads the table as it is now, so routes registered after
    the ``Waypoint`` was created are visible immediately.

    Usage::

        table = RouteTable()
        table.add("GET", "/users/{id}/edit", name="users.edit")

        waypoint = Waypoint(table)
        waypoint.route("users.edit", 1)      # "/users/1/edit"
        waypoint.redirect("users.edit", 1)   # Redirect("/users/1/edit", 303)
    """

    __slots__ = ("config", "table")

    def __init__(self, table: RouteTable, config: WaypointConfig | None = None) -> None:
        self.table = table
        self.config: WaypointConfig = config or WaypointConfig()

    # -- URL building --

    def route(self, name: str, *params: object) -> str | None:
        """Build a path for the named route.

        ::

            waypoint.route("users.edit", user.id)  # "/users/1/edit"

        Returns None for unknown names. Raises ``MissingRouteParameters``
        when fewer params are given than the route has placeholders.
        """
        return resolve(self.table, name, params)

    def url(self, request: Request, name: str, *params: object) -> str | None:
        """Build an absolute URL for the named route, based on *request*'s origin."""
        path = self.route(name, *params)
        if path is None:
            return None
        return self.base_url(request) + path

    def routes(self) -> dict[str, Route]:
        """Name -> route for every named route in the table."""
        return named_routes(self.table)

    def index(self) -> dict[str, NamedRoute]:
        """Name -> serialized descriptor, with methods merged per URI."""
        return build_index(self.table)

    def base_url(self, request: Request) -> str:
        return base_url(request, tls=self.config.tls)

    # -- Serialization --

    def document(self, base_url: str) -> dict[str, object]:
        return to_document(self.table, base_url)

    def serialize(self, base_url: str) -> str:
        """JSON route table for *base_url*."""
        return serialize(self.table, base_url)

    def script_json(self, request: Request) -> str:
        """JSON route table for *request*, safe to inline in a script element."""
        return script_safe(self.serialize(self.base_url(request)))

    def script(self, request: Request, *, nonce: str | None = None) -> Markup:
        """The ``<script>`` element defining the JS route table global."""
        return routes_script(self, request, nonce=nonce)

    # -- Templates --

    def setup(self, env: Environment) -> Environment:
        """Register ``routes()`` and ``route()`` on a kida Environment."""
        return register_globals(env, self)

    # -- Responses --

    def redirect(
        self,
        route: str,
        *params: object,
        redirect_type: RedirectType | None = None,
    ) -> Redirect:
        """Create a redirect to a named route.

        ::

            return waypoint.redirect("dashboard")

        Falls back to treating *route* as a literal path when no route has
        that name. Defaults to ``config.redirect_type`` (non-permanent) to
        avoid unexpected browser caching; pass ``RedirectType.PERMANENT``
        to allow it.
        """
        url = self.route(route, *params)
        if url is None:
            url = route
        status = redirect_type if redirect_type is not None else self.config.redirect_type
        return Redirect(url=url, status=int(status))

    # -- Validation --

    def check(self) -> dict[str, list[str]]:
        """Report route names registered with more than one URI.

        Each conflict is logged as a warning; the last URI registered wins.
        With ``config.strict_names`` the conflicts raise instead.

        Raises:
            ConfigurationError: If ``strict_names`` is set and any name
                maps to several URIs.
        """
        conflicts = find_conflicts(self.table)
        if conflicts and self.config.strict_names:
            details = "; ".join(f"{name}: {', '.join(uris)}" for name, uris in conflicts.items())
            msg = f"Route names registered with conflicting URIs: {details}"
            raise ConfigurationError(msg)
        for name, uris in conflicts.items():
            logger.warning(
                "Route name %r is registered with %d URIs; %r wins", name, len(uris), uris[-1]
            )
        return conflicts
