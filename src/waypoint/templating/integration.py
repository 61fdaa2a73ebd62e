"""Kida template integration.

Exposes the named-route table to templates. ``register_globals()`` binds
helpers onto a kida Environment the caller owns; nothing is written to a
process-wide registry.

Template usage::

    <head>
      {{ routes() }}
    </head>
    <a href="{{ route('users.edit', user.id) }}">Edit</a>
"""

from __future__ import annotations

import html
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from kida import Environment
from kida.template import Markup

from waypoint.context import get_request
from waypoint.errors import RenderContextError, RouteNotFound
from waypoint.http.request import Request

if TYPE_CHECKING:
    from waypoint.app import Waypoint

logger = logging.getLogger("waypoint.templating")


def routes_script(waypoint: Waypoint, request: Request, *, nonce: str | None = None) -> Markup:
    """Render the ``<script>`` element assigning the route table to a JS global.

    The element looks like::

        <script type="text/javascript">const Ziggy={...};</script>
    """
    document = waypoint.script_json(request)
    nonce_attr = f' nonce="{html.escape(nonce, quote=True)}"' if nonce else ""
    js_global = waypoint.config.js_global
    return Markup(
        f'<script type="text/javascript"{nonce_attr}>const {js_global}={document};</script>'
    )


def routes_global(waypoint: Waypoint) -> Callable[..., Markup]:
    """The ``routes(request=None, nonce=None)`` template global.

    With no explicit request it uses the request bound by ``request_scope()``,
    and raises ``RenderContextError`` when there is none.
    """

    def routes(request: Request | None = None, nonce: str | None = None) -> Markup:
        if request is None:
            try:
                request = get_request()
            except LookupError:
                raise RenderContextError from None
        return routes_script(waypoint, request, nonce=nonce)

    return routes


def route_global(waypoint: Waypoint) -> Callable[..., str]:
    """The ``route(name, *params)`` template global.

    Raises ``RouteNotFound`` for unknown names so template typos fail at
    render time.
    """

    def route(name: str, *params: object) -> str:
        url = waypoint.route(name, *params)
        if url is None:
            raise RouteNotFound(name)
        return url

    return route


def register_globals(env: Environment, waypoint: Waypoint) -> Environment:
    """Add the ``routes`` and ``route`` globals to *env*."""
    env.add_global("routes", routes_global(waypoint))
    env.add_global("route", route_global(waypoint))
    logger.debug("Registered route globals on %r", env)
    return env
