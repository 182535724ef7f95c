"""
Main Kibana API client.

This module provides the KibanaClient class, the primary entry point for
interacting with the Kibana management API. It binds one credential and
one immutable configuration to the endpoint clients.
"""

from typing import Optional
import logging

from kibana_client.auth import APIKey, BasicAuth, Credential
from kibana_client.endpoints.roles import RolesClient
from kibana_client.endpoints.spaces import SpacesClient
from kibana_client.exceptions import ConfigurationError
from kibana_client.http import HTTPClient
from kibana_client.options import ClientConfig, ClientOption, build_config

logger = logging.getLogger(__name__)


class KibanaClient:
    """
    Main client for the Kibana API.

    Example usage:
        ```python
        from kibana_client import KibanaClient, CreateSpaceOptions, with_base_url

        with KibanaClient.from_basic_auth(
            "elastic", "secret", with_base_url("https://kibana.example.com")
        ) as client:
            space, response = client.spaces.create(
                CreateSpaceOptions(id="marketing", name="Marketing")
            )
            roles, response = client.roles.list()
        ```

    Every call returns the response envelope alongside the decoded value;
    failures raise KibanaClientError subclasses.
    """

    def __init__(self, credential: Credential, *options: Optional[ClientOption]):
        """
        Initialize the Kibana client.

        Args:
            credential: BasicAuth or APIKey
            *options: Configuration functions (``with_base_url`` etc.)

        Raises:
            ConfigurationError: If the credential or configuration is invalid
        """
        if not isinstance(credential, (BasicAuth, APIKey)):
            raise ConfigurationError(
                f"expected BasicAuth or APIKey credential, got {type(credential).__name__}"
            )

        self._config = build_config(*options)
        self._credential = credential
        self._http = HTTPClient(self._config, credential)

        self.spaces = SpacesClient(self._http)
        self.roles = RolesClient(self._http)

        logger.debug(f"Created {self!r}")

    @classmethod
    def from_basic_auth(
        cls,
        username: str,
        password: str,
        *options: Optional[ClientOption],
    ) -> "KibanaClient":
        """Create a client authenticating with username and password."""
        return cls(BasicAuth(username=username, password=password), *options)

    @classmethod
    def from_api_key(cls, api_key: str, *options: Optional[ClientOption]) -> "KibanaClient":
        """Create a client authenticating with an API key."""
        return cls(APIKey(key=api_key), *options)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        """Get the normalized base URL (always ends with ``api/``)."""
        return self._config.base_url

    @property
    def user_agent(self) -> str:
        return self._config.user_agent

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def http(self) -> HTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()
        logger.debug("Client closed")

    def __enter__(self) -> "KibanaClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        auth = "basic" if isinstance(self._credential, BasicAuth) else "api key"
        return f"KibanaClient(base_url={self.base_url!r}, auth={auth})"
