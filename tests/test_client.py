"""Tests for KibanaClient."""

import base64

import httpx
import pytest

from kibana_client import (
    APIKey,
    BasicAuth,
    ConfigurationError,
    KibanaClient,
    with_base_url,
    with_http_client,
    with_timeout,
    with_user_agent,
)
from kibana_client.endpoints import RolesClient, SpacesClient

from conftest import API_URL, KIBANA_URL


class TestKibanaClientInit:
    """Tests for client construction."""

    def test_defaults(self):
        """Test client creation with default configuration."""
        client = KibanaClient(APIKey(key="k"))
        assert client.base_url == "http://localhost:5601/api/"
        assert client.user_agent.startswith("kibana-client/")
        assert client.config.timeout == 10.0
        assert isinstance(client.spaces, SpacesClient)
        assert isinstance(client.roles, RolesClient)
        client.close()

    def test_from_basic_auth(self):
        """Test creating a client with username and password."""
        client = KibanaClient.from_basic_auth("elastic", "changeme", with_base_url(KIBANA_URL))
        assert client.credential == BasicAuth(username="elastic", password="changeme")
        assert client.base_url == API_URL
        client.close()

    def test_from_api_key(self):
        """Test creating a client with an API key."""
        client = KibanaClient.from_api_key("secret", with_timeout(3))
        assert client.credential == APIKey(key="secret")
        assert client.config.timeout == 3
        client.close()

    def test_invalid_credential(self):
        """Test that unknown credential types are rejected."""
        with pytest.raises(ConfigurationError, match="expected BasicAuth or APIKey"):
            KibanaClient(("elastic", "changeme"))

    def test_invalid_base_url(self):
        """Test that a base URL without scheme is rejected."""
        with pytest.raises(ConfigurationError):
            KibanaClient(APIKey(key="k"), with_base_url("kibana.test"))

    def test_repr_hides_secrets(self):
        """Test client repr."""
        client = KibanaClient.from_basic_auth("elastic", "changeme", with_base_url(KIBANA_URL))
        assert repr(client) == "KibanaClient(base_url='http://kibana.test/api/', auth=basic)"
        assert "changeme" not in repr(client)
        client.close()


class TestKibanaClientLifecycle:
    def test_context_manager_closes(self):
        """Test that leaving the with block closes the owned transport."""
        with KibanaClient.from_api_key("k") as client:
            http_client = client.http._client
            assert not http_client.is_closed
        assert http_client.is_closed

    def test_caller_http_client_stays_open(self):
        """Test that a caller-supplied httpx client is left open."""
        http_client = httpx.Client()
        with KibanaClient.from_api_key("k", with_http_client(http_client)) as client:
            assert client.http._client is http_client
        assert not http_client.is_closed
        http_client.close()


class TestKibanaClientRequests:
    def test_basic_auth_and_user_agent(self, kibana_api):
        """Test the headers every call carries."""
        route = kibana_api.get(f"{API_URL}security/role").mock(return_value=httpx.Response(200, json=[]))

        with KibanaClient.from_basic_auth(
            "elastic", "changeme", with_base_url(KIBANA_URL), with_user_agent("deployer/2.0")
        ) as client:
            roles, _ = client.roles.list()

        request = route.calls.last.request
        expected = base64.b64encode(b"elastic:changeme").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["User-Agent"] == "deployer/2.0"
        assert request.headers["Accept"] == "application/json"
        assert roles == []

    def test_default_base_url(self, kibana_api):
        """Test that a client without with_base_url talks to the local Kibana API."""
        route = kibana_api.get("http://localhost:5601/api/spaces/space").mock(
            return_value=httpx.Response(200, json=[])
        )

        with KibanaClient.from_api_key("k") as client:
            spaces, _ = client.spaces.list()

        assert spaces == []
        assert str(route.calls.last.request.url) == "http://localhost:5601/api/spaces/space"

    def test_base_url_with_prefix(self, kibana_api):
        """Test a Kibana served below a path prefix."""
        route = kibana_api.get("https://proxy.test/kibana/api/spaces/space").mock(
            return_value=httpx.Response(200, json=[])
        )

        with KibanaClient.from_api_key("k", with_base_url("https://proxy.test/kibana")) as client:
            client.spaces.list()

        assert route.called
