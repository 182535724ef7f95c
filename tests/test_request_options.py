"""Tests for request customizers."""

import httpx
import pytest

from kibana_client.request_options import with_header, with_headers, with_space


def make_request(url="http://kibana.test/api/spaces/space/s1"):
    return httpx.Request("GET", url, headers={"Accept": "application/json"})


class TestHeaders:
    def test_with_header(self):
        """Test overriding a single header."""
        request = make_request()
        with_header("Accept", "text/plain")(request)
        assert request.headers["Accept"] == "text/plain"

    def test_with_headers(self):
        """Test setting several headers at once."""
        request = make_request()
        with_headers({"X-Opaque-Id": "abc", "kbn-xsrf": "reporting"})(request)
        assert request.headers["X-Opaque-Id"] == "abc"
        assert request.headers["kbn-xsrf"] == "reporting"


class TestWithSpace:
    """Tests for the space-scoping customizer."""

    def test_rewrites_path(self):
        """Test scoping a request to a space."""
        request = make_request()
        with_space("marketing")(request)
        assert str(request.url) == "http://kibana.test/s/marketing/api/spaces/space/s1"

    def test_keeps_query_and_prefix(self):
        """Test that the path prefix and query survive scoping."""
        request = make_request("http://kibana.test/kibana/api/spaces/space?purpose=any")
        with_space("sales team")(request)
        assert request.url.path == "/kibana/s/sales team/api/spaces/space"
        assert request.url.params["purpose"] == "any"

    def test_requires_api_segment(self):
        """Test a URL without an api segment."""
        with pytest.raises(ValueError):
            with_space("marketing")(make_request("http://kibana.test/spaces"))
