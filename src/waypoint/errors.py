"""Waypoint exception hierarchy.

Shared across the route table, registry, serializer and template
integration so every module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when configuration or route registration is invalid.

    Typically surfaced at startup by ``parse_path()`` or ``Waypoint.check()``.
    """


class RouteNotFound(WaypointError, LookupError):  # noqa: N818
    """A route name is not present in the route table.

    ``resolve()`` never raises this; it returns ``None``. Raised only by
    surfaces where an absent route is a programming error (template globals).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route {name!r} is not in the route list.")


class MissingRouteParameters(WaypointError):
    """Fewer parameters were supplied than the route has placeholders."""

    def __init__(self, name: str, expected: int, given: int) -> None:
        self.name = name
        self.expected = expected
        self.given = given
        super().__init__(
            f"Route {name!r} requires at least {expected} parameter(s), got {given}."
        )


class RenderContextError(WaypointError):
    """The route table was rendered without a request in scope.

    Signals misuse of the embedding call site rather than a data problem.
    """

    reason = "Waypoint requires a request to be present when rendering your views."
    suggested_fixes = (
        "Render templates inside request_scope(request), or pass the request "
        "explicitly: {{ routes(request) }}.",
    )

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.reason)
