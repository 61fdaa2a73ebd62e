"""Tests for waypoint.templating.integration — kida globals and script tag."""

import json

import pytest
from kida import Environment

from waypoint.app import Waypoint
from waypoint.config import WaypointConfig
from waypoint.context import request_scope
from waypoint.errors import RenderContextError, RouteNotFound
from waypoint.http.headers import Headers
from waypoint.http.request import Request
from waypoint.routing.table import RouteTable
from waypoint.templating.integration import (
    register_globals,
    route_global,
    routes_global,
    routes_script,
)

PREFIX = '<script type="text/javascript">const Ziggy='
SUFFIX = ";</script>"


def _request() -> Request:
    headers = Headers.from_pairs(
        [("X-Forwarded-Proto", "https"), ("X-Forwarded-Host", "example.com")]
    )
    return Request(headers=headers)


def _waypoint(config: WaypointConfig | None = None) -> Waypoint:
    table = RouteTable()
    table.add("GET", "/users/{id}/edit", name="users.edit")
    table.add("GET", "/files/**", name="files.show")
    return Waypoint(table, config)


def _document(script: str) -> dict:
    assert script.startswith(PREFIX)
    assert script.endswith(SUFFIX)
    return json.loads(script[len(PREFIX) : -len(SUFFIX)])


class TestRoutesScript:
    def test_embeds_document(self) -> None:
        doc = _document(str(routes_script(_waypoint(), _request())))
        assert doc["url"] == "https://example.com"
        assert set(doc["routes"]) == {"users.edit", "files.show"}

    def test_custom_js_global(self) -> None:
        script = str(routes_script(_waypoint(WaypointConfig(js_global="Routes")), _request()))
        assert "const Routes=" in script

    def test_nonce(self) -> None:
        script = str(routes_script(_waypoint(), _request(), nonce='abc"123'))
        assert script.startswith('<script type="text/javascript" nonce="abc&quot;123">')

    def test_closing_tag_in_route_is_escaped(self) -> None:
        table = RouteTable()
        table.add("GET", "/x/</script>", name="evil")
        script = str(routes_script(Waypoint(table), _request()))
        assert script.count("</script>") == 1


class TestRoutesGlobal:
    def test_explicit_request(self) -> None:
        routes = routes_global(_waypoint())
        assert str(routes(_request())).startswith(PREFIX)

    def test_uses_request_scope(self) -> None:
        routes = routes_global(_waypoint())
        with request_scope(_request()):
            assert _document(str(routes()))["url"] == "https://example.com"

    def test_without_request_is_fatal(self) -> None:
        routes = routes_global(_waypoint())
        with pytest.raises(RenderContextError):
            routes()


class TestRouteGlobal:
    def test_builds_path(self) -> None:
        route = route_global(_waypoint())
        assert route("users.edit", 5) == "/users/5/edit"

    def test_unknown_name_raises(self) -> None:
        route = route_global(_waypoint())
        with pytest.raises(RouteNotFound):
            route("missing")


class TestKidaRendering:
    def _env(self) -> Environment:
        env = Environment(autoescape=True)
        return register_globals(env, _waypoint())

    def test_routes_tag_is_not_escaped(self) -> None:
        tpl = self._env().from_string("<head>{{ routes() }}</head>")
        with request_scope(_request()):
            html = tpl.render()
        assert PREFIX in html
        assert "&lt;script" not in html

    def test_routes_with_request_in_context(self) -> None:
        tpl = self._env().from_string("{{ routes(request) }}")
        html = tpl.render({"request": _request()})
        assert html.strip().startswith(PREFIX)

    def test_route_helper(self) -> None:
        tpl = self._env().from_string('<a href="{{ route("users.edit", user_id) }}">Edit</a>')
        html = tpl.render({"user_id": 7})
        assert 'href="/users/7/edit"' in html
