"""Tests for client configuration."""

import httpx
import pytest

from kibana_client import __version__
from kibana_client.exceptions import ConfigurationError
from kibana_client.options import (
    ClientConfig,
    build_config,
    normalize_base_url,
    with_base_url,
    with_http_client,
    with_timeout,
    with_user_agent,
)


class TestNormalizeBaseURL:
    """Tests for base URL normalization."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("http://host", "http://host/api/"),
            ("http://host/", "http://host/api/"),
            ("http://host/api/", "http://host/api/"),
            ("http://host/api", "http://host/api/"),
            ("https://host:5601/kibana", "https://host:5601/kibana/api/"),
        ],
    )
    def test_normalization(self, url, expected):
        """Test base URL normalization."""
        assert normalize_base_url(url) == expected

    @pytest.mark.parametrize("url", ["not a url", "ftp://host", "http://"])
    def test_invalid(self, url):
        """Test base URLs that cannot be used."""
        with pytest.raises(ValueError):
            normalize_base_url(url)


class TestBuildConfig:
    """Tests for applying configuration functions."""

    def test_defaults(self):
        """Test default configuration values."""
        config = build_config()
        assert config.base_url == "http://localhost:5601/api/"
        assert config.timeout == 10.0
        assert config.user_agent == f"kibana-client/{__version__}"
        assert config.http_client is None

    def test_options_applied_in_order(self):
        """Test that later functions override earlier ones."""
        config = build_config(
            with_base_url("http://first"),
            with_timeout(3),
            with_base_url("http://second"),
            with_user_agent("tests/1.0"),
        )
        assert config.base_url == "http://second/api/"
        assert config.timeout == 3.0
        assert config.user_agent == "tests/1.0"

    def test_none_options_skipped(self):
        """Test that None entries are ignored."""
        assert build_config(None, with_timeout(5)).timeout == 5.0

    def test_invalid_base_url(self):
        """Test an invalid base URL."""
        with pytest.raises(ConfigurationError):
            build_config(with_base_url("ftp://host"))

    def test_invalid_timeout(self):
        """Test a non-positive timeout."""
        with pytest.raises(ConfigurationError):
            build_config(with_timeout(0))

    def test_failing_option(self):
        """Test that a failing configuration function aborts construction."""

        def broken(settings):
            raise RuntimeError("cannot read settings")

        with pytest.raises(ConfigurationError) as exc_info:
            build_config(broken)

        assert "cannot read settings" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_http_client(self):
        """Test supplying an httpx client."""
        with httpx.Client() as http_client:
            config = build_config(with_http_client(http_client))
            assert config.http_client is http_client

    def test_http_client_type_checked(self):
        """Test that with_http_client rejects other objects."""
        with pytest.raises(ConfigurationError):
            build_config(with_http_client("not a client"))

    def test_config_is_frozen(self):
        """Test that the configuration cannot be modified."""
        config = ClientConfig()
        with pytest.raises(Exception):
            config.timeout = 1.0
