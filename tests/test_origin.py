"""Tests for waypoint.http.origin — scheme, host and origin detection."""

import pytest

from waypoint.errors import WaypointError
from waypoint.http.headers import Headers
from waypoint.http.origin import base_url, host, is_secure, origin, url_port
from waypoint.http.request import Request


def _request(
    *headers: tuple[str, str],
    scheme: str = "http",
    server: tuple[str, int | None] | None = None,
) -> Request:
    return Request(
        headers=Headers.from_pairs(headers),
        scheme=scheme,
        server=server,
    )


class TestIsSecure:
    @pytest.mark.parametrize("proto", ["https", "on", "ssl", "1", "HTTPS"])
    def test_forwarded_proto_secure(self, proto: str) -> None:
        assert is_secure(_request(("X-Forwarded-Proto", proto))) is True

    def test_forwarded_proto_http_overrides_tls(self) -> None:
        assert is_secure(_request(("X-Forwarded-Proto", "http")), tls=True) is False

    def test_tls_configured(self) -> None:
        assert is_secure(_request(), tls=True) is True

    def test_asgi_scheme(self) -> None:
        assert is_secure(_request(scheme="https")) is True
        assert is_secure(_request()) is False


class TestHost:
    def test_forwarded_host_wins(self) -> None:
        req = _request(("Host", "internal:8000"), ("X-Forwarded-Host", "example.com"))
        assert host(req) == "example.com"

    def test_host_header(self) -> None:
        assert host(_request(("Host", "example.com"))) == "example.com"

    def test_missing(self) -> None:
        assert host(_request()) is None


class TestOrigin:
    def test_forwarded_headers(self) -> None:
        req = _request(("X-Forwarded-Proto", "https"), ("X-Forwarded-Host", "example.com"))
        assert origin(req) == "https://example.com"

    def test_origin_header_wins(self) -> None:
        req = _request(("Origin", "https://app.example.com"), ("Host", "internal"))
        assert origin(req) == "https://app.example.com"

    def test_host_header_with_tls(self) -> None:
        assert origin(_request(("Host", "example.com")), tls=True) == "https://example.com"

    def test_host_header_plain(self) -> None:
        assert origin(_request(("Host", "localhost:8000"))) == "http://localhost:8000"

    def test_falls_back_to_server_address(self) -> None:
        assert origin(_request(server=("127.0.0.1", 8000))) == "http://127.0.0.1:8000"

    def test_server_without_port(self) -> None:
        assert origin(_request(server=("/tmp/app.sock", None))) == "http:///tmp/app.sock"

    def test_no_host_at_all(self) -> None:
        with pytest.raises(WaypointError, match="Cannot determine the request host"):
            origin(_request())

    @pytest.mark.parametrize("value", ["example.com:abc", "example.com:99999"])
    def test_malformed_host_port(self, value: str) -> None:
        with pytest.raises(WaypointError, match="Invalid port"):
            origin(_request(("Host", value)))

    def test_malformed_origin_port(self) -> None:
        with pytest.raises(WaypointError, match="Invalid port"):
            origin(_request(("Origin", "https://example.com:abc")))


class TestBaseURL:
    def test_strips_trailing_slash(self) -> None:
        assert base_url(_request(("Origin", "https://example.com/"))) == "https://example.com"


class TestURLPort:
    def test_explicit(self) -> None:
        assert url_port("http://localhost:8000") == 8000

    def test_default(self) -> None:
        assert url_port("https://example.com") is None

    def test_invalid_is_none(self) -> None:
        assert url_port("http://example.com:abc") is None
