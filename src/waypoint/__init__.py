"""Waypoint — named routes for server code and client-side templates.

Name your routes once, then build the same URLs in Python, in kida
templates and in the browser (via a Ziggy-compatible route table).

Basic usage::

    from waypoint import RouteTable, Waypoint

    table = RouteTable()

    @table.get("/users/{id}/edit", name="users.edit")
    def edit(request): ...

    waypoint = Waypoint(table)
    waypoint.route("users.edit", 1)  # "/users/1/edit"

Templates::

    waypoint.setup(env)
    # {{ routes() }} -> <script type="text/javascript">const Ziggy={...};</script>
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MissingRouteParameters",
    "Redirect",
    "RedirectType",
    "RenderContextError",
    "Request",
    "Route",
    "RouteNotFound",
    "RouteTable",
    "Waypoint",
    "WaypointConfig",
    "WaypointError",
    "get_request",
    "request_scope",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name == "Waypoint":
        from waypoint.app import Waypoint

        return Waypoint

    if name == "WaypointConfig":
        from waypoint.config import WaypointConfig

        return WaypointConfig

    if name == "Request":
        from waypoint.http.request import Request

        return Request

    if name in ("Redirect", "RedirectType"):
        from waypoint.http import response as _resp

        return getattr(_resp, name)

    if name == "Route":
        from waypoint.routing.route import Route

        return Route

    if name == "RouteTable":
        from waypoint.routing.table import RouteTable

        return RouteTable

    if name in ("get_request", "request_scope"):
        from waypoint import context as _ctx

        return getattr(_ctx, name)

    if name in (
        "ConfigurationError",
        "MissingRouteParameters",
        "RenderContextError",
        "RouteNotFound",
        "WaypointError",
    ):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
