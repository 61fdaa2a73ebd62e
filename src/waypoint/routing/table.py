"""Route table: registration-ordered collection of routes.

Routes are registered during setup. Names can be attached at
registration or afterwards; lookups always read the live table.
"""

from collections.abc import Callable, Iterator
from dataclasses import replace
from typing import Any

from waypoint.errors import ConfigurationError
from waypoint.routing.route import PathSegment, Route, SegmentKind

Handler = Callable[..., Any]


def _parse_param(part: str) -> PathSegment:
    inner = part[1:-1]
    if inner.endswith("..."):
        return PathSegment(SegmentKind.CATCHALL, inner[:-3])
    if ":" in inner:
        param_name, param_type = inner.split(":", 1)
    else:
        param_name = inner
        param_type = "str"
    if not param_name:
        msg = f"Empty parameter name in path segment {part!r}."
        raise ConfigurationError(msg)
    if param_type == "path":
        return PathSegment(SegmentKind.CATCHALL, param_name)
    return PathSegment(SegmentKind.PARAMETER, param_name, param_type)


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Parse a route path string into segments.

    Examples::

        "/users"             -> (CONSTANT "users",)
        "/users/{id}"        -> (CONSTANT "users", PARAMETER "id")
        "/users/{id:int}"    -> (CONSTANT "users", PARAMETER "id" typed "int")
        "/any/*"             -> (CONSTANT "any", WILDCARD)
        "/files/**"          -> (CONSTANT "files", CATCHALL)
        "/files/{rest:path}" -> (CONSTANT "files", CATCHALL "rest")
        "/files/{rest...}"   -> (CONSTANT "files", CATCHALL "rest")

    Raises ``ConfigurationError`` if a catch-all is not the last segment.
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if segments and segments[-1].kind is SegmentKind.CATCHALL:
            msg = f"Catch-all must be the last segment in {path!r}."
            raise ConfigurationError(msg)
        if part == "**":
            segments.append(PathSegment(SegmentKind.CATCHALL))
        elif part == "*":
            segments.append(PathSegment(SegmentKind.WILDCARD))
        elif part.startswith("{") and part.endswith("}"):
            segments.append(_parse_param(part))
        else:
            segments.append(PathSegment(SegmentKind.CONSTANT, part))
    return tuple(segments)


class RouteTable:
    """The live collection of registered routes.

    Usage::

        table = RouteTable()

        @table.get("/users/{id}/edit", name="users.edit")
        def edit(request): ...

        route = table.add("DELETE", "/users/{id}")
        table.name(route, "users.destroy")
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def add(
        self,
        method: str,
        path: str,
        handler: Handler | None = None,
        *,
        name: str | None = None,
    ) -> Route:
        """Register a single route and return its record."""
        route = Route(
            method=method.upper(),
            segments=parse_path(path),
            handler=handler,
            name=name or None,
        )
        self._routes.append(route)
        return route

    def name(self, route: Route, name: str) -> Route:
        """Attach *name* to an already registered *route*.

        The renamed record keeps its position in registration order.
        Raises ``LookupError`` if *route* is not in this table.
        """
        for i, existing in enumerate(self._routes):
            if existing is route:
                named = replace(route, name=name)
                self._routes[i] = named
                return named
        msg = f"Route {route.method} {route.path} is not registered in this table."
        raise LookupError(msg)

    # -- Decorators --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` for path parameters,
                ``*`` for an anonymous segment and ``**`` for the rest
                of the path.
            methods: HTTP methods. Defaults to ``["GET"]``. One route
                record is registered per method.
            name: Optional route name for URL generation.
        """

        def decorator(func: Handler) -> Handler:
            for method in methods or ["GET"]:
                self.add(method, path, func, name=name)
            return func

        return decorator

    def get(self, path: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        return self.route(path, methods=["GET"], name=name)

    def post(self, path: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        return self.route(path, methods=["POST"], name=name)

    def put(self, path: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        return self.route(path, methods=["PUT"], name=name)

    def patch(self, path: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        return self.route(path, methods=["PATCH"], name=name)

    def delete(self, path: str, *, name: str | None = None) -> Callable[[Handler], Handler]:
        return self.route(path, methods=["DELETE"], name=name)

    # -- Introspection --

    @property
    def all(self) -> list[Route]:
        """Snapshot of every registered route, in registration order."""
        return list(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.all)

    def __len__(self) -> int:
        return len(self._routes)
