"""Tests for waypoint.config — WaypointConfig frozen dataclass."""

import pytest

from waypoint.config import WaypointConfig
from waypoint.errors import ConfigurationError
from waypoint.http.response import RedirectType


class TestWaypointConfig:
    def test_defaults(self) -> None:
        cfg = WaypointConfig()
        assert cfg.js_global == "Ziggy"
        assert cfg.ssl_certfile is None
        assert cfg.strict_names is False
        assert cfg.redirect_type is RedirectType.NORMAL
        assert cfg.tls is False

    def test_tls_from_certfile(self) -> None:
        cfg = WaypointConfig(ssl_certfile="cert.pem", ssl_keyfile="key.pem")
        assert cfg.tls is True

    @pytest.mark.parametrize("name", ["Routes", "$routes", "_z"])
    def test_valid_js_global(self, name: str) -> None:
        assert WaypointConfig(js_global=name).js_global == name

    @pytest.mark.parametrize("name", ["", "my-routes", "1routes", "a b"])
    def test_invalid_js_global(self, name: str) -> None:
        with pytest.raises(ConfigurationError, match="js_global"):
            WaypointConfig(js_global=name)

    def test_frozen(self) -> None:
        cfg = WaypointConfig()
        with pytest.raises(AttributeError):
            cfg.js_global = "Other"  # type: ignore[misc]
