"""Request-scoped context via ContextVar.

Provides:
- ``request_var``: The current ``Request`` for this task/thread.
- ``request_scope``: Bind a request for the duration of a ``with`` block.

The host framework's request pipeline binds the request before rendering
templates. Accessing it outside that scope raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading (3.14t). No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from waypoint.http.request import Request

request_var: ContextVar[Request] = ContextVar("waypoint_request")
"""The current request. Set by ``request_scope()`` or the host pipeline."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


@contextmanager
def request_scope(request: Request) -> Iterator[Request]:
    """Bind *request* as the current request, restoring the previous one on exit.

    Usage::

        with request_scope(request):
            html = template.render(user=user)
    """
    token = request_var.set(request)
    try:
        yield request
    finally:
        request_var.reset(token)
