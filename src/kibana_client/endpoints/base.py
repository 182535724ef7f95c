"""
Base class for endpoint clients.

Endpoint clients only pick a path, a method and the option/result types;
everything else is done by HTTPClient.
"""

from urllib.parse import quote

from kibana_client.http import HTTPClient


class BaseEndpointClient:
    """Common functionality for endpoint clients."""

    def __init__(self, http_client: HTTPClient, base_path: str):
        """
        Initialize the endpoint client.

        Args:
            http_client: The underlying HTTP client
            base_path: Path of the collection relative to the API root
                (e.g., "spaces/space"), without leading slash
        """
        self._http = http_client
        self._base_path = base_path.strip("/")

    @property
    def base_path(self) -> str:
        """Get the base path for this endpoint."""
        return self._base_path

    def _build_path(self, *parts: str) -> str:
        """Append identifiers to the base path, each escaped as one segment."""
        clean_parts = [quote(str(p), safe="") for p in parts if p]
        if clean_parts:
            return f"{self._base_path}/{'/'.join(clean_parts)}"
        return self._base_path
