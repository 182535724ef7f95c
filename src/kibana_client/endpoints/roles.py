"""
Client for the role management endpoints.

Kibana API docs: https://www.elastic.co/guide/en/kibana/current/role-management-api.html
"""

from typing import List, Optional, Tuple

from kibana_client.endpoints.base import BaseEndpointClient
from kibana_client.http import HTTPClient, Response
from kibana_client.models.roles import CreateOrUpdateRoleOptions, Role
from kibana_client.request_options import RequestOption


class RolesClient(BaseEndpointClient):
    """
    Client for roles endpoints.
    """

    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(http_client, "security/role")

    def create_or_update(
        self,
        name: str,
        opt: CreateOrUpdateRoleOptions,
        *options: Optional[RequestOption],
    ) -> Tuple[Optional[Role], Response]:
        """
        Create a role, or replace it if it exists.

        The API answers 204 without a body, in which case the returned role
        is None.
        """
        return self._http.put(self._build_path(name), json_data=opt, result=Role, options=options)

    def get(
        self,
        name: str,
        *options: Optional[RequestOption],
    ) -> Tuple[Role, Response]:
        """Get Role"""
        return self._http.get(self._build_path(name), result=Role, options=options)

    def list(
        self,
        *options: Optional[RequestOption],
    ) -> Tuple[List[Role], Response]:
        """List Roles"""
        return self._http.get(self._base_path, result=List[Role], options=options)

    def delete(
        self,
        name: str,
        *options: Optional[RequestOption],
    ) -> Response:
        """Delete Role"""
        return self._http.delete(self._build_path(name), options=options)
