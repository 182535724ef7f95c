from kibana_client.endpoints.base import BaseEndpointClient
from kibana_client.endpoints.roles import RolesClient
from kibana_client.endpoints.spaces import SpacesClient

__all__ = ["BaseEndpointClient", "RolesClient", "SpacesClient"]
