"""PathSegment and Route frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Fixed placeholder names for segments that carry no name of their own
WILDCARD = "wildcard"
CATCHALL = "fallbackPlaceholder"


class SegmentKind(Enum):
    """What a path segment matches."""

    CONSTANT = "constant"
    PARAMETER = "parameter"
    WILDCARD = "wildcard"
    CATCHALL = "catchall"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Constant:  ``/users``   (kind=CONSTANT, value="users")
    Parameter: ``/{id}``    (kind=PARAMETER, value="id", param_type="str")
    Typed:     ``/{id:int}`` (kind=PARAMETER, value="id", param_type="int")
    Wildcard:  ``/*``       (kind=WILDCARD)
    Catch-all: ``/**``      (kind=CATCHALL, consumes the rest of the path)
    """

    kind: SegmentKind
    value: str = ""
    param_type: str = "str"

    @property
    def is_placeholder(self) -> bool:
        """True for segments that consume exactly one parameter."""
        return self.kind in (SegmentKind.PARAMETER, SegmentKind.WILDCARD)

    @property
    def placeholder(self) -> str | None:
        """The placeholder name reported to clients, None for constants."""
        match self.kind:
            case SegmentKind.CONSTANT:
                return None
            case SegmentKind.PARAMETER:
                return self.value
            case SegmentKind.WILDCARD:
                return WILDCARD
            case SegmentKind.CATCHALL:
                return CATCHALL

    @property
    def token(self) -> str:
        """The segment rendered into a URI template."""
        name = self.placeholder
        return self.value if name is None else f"{{{name}}}"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    One record per HTTP method. ``name`` is attached at registration time
    or later via ``RouteTable.name()``.
    """

    method: str
    segments: tuple[PathSegment, ...]
    handler: Callable[..., Any] | None = None
    name: str | None = None

    @property
    def uri(self) -> str:
        """Placeholder template, e.g. ``users/{id}/edit``."""
        return "/".join(seg.token for seg in self.segments)

    @property
    def path(self) -> str:
        """The route path with a leading slash, e.g. ``/users/{id}/edit``."""
        return "/" + self.uri

    @property
    def parameters(self) -> list[str]:
        """Placeholder names in traversal order."""
        return [name for seg in self.segments if (name := seg.placeholder) is not None]

    @property
    def required_parameters(self) -> int:
        """How many parameters ``resolve()`` needs at minimum."""
        return sum(1 for seg in self.segments if seg.is_placeholder)

    @property
    def has_catchall(self) -> bool:
        return any(seg.kind is SegmentKind.CATCHALL for seg in self.segments)
