"""
Client for the spaces endpoints.

Kibana API docs: https://www.elastic.co/guide/en/kibana/current/spaces-api.html
"""

from typing import List, Optional, Tuple

from kibana_client.endpoints.base import BaseEndpointClient
from kibana_client.http import HTTPClient, Response
from kibana_client.models.spaces import (
    CreateSpaceOptions,
    GetAllSpacesOptions,
    Space,
    UpdateSpaceOptions,
)
from kibana_client.request_options import RequestOption


class SpacesClient(BaseEndpointClient):
    """Create, read, update and delete spaces."""

    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(http_client, "spaces/space")

    def create(
        self,
        opt: CreateSpaceOptions,
        *options: Optional[RequestOption],
    ) -> Tuple[Space, Response]:
        """
        Create a space.

        Args:
            opt: The new space; ``id`` and ``name`` are required by the API
            *options: Request customizers

        Returns:
            The created space and the response envelope
        """
        return self._http.post(self._base_path, json_data=opt, result=Space, options=options)

    def update(
        self,
        space_id: str,
        opt: UpdateSpaceOptions,
        *options: Optional[RequestOption],
    ) -> Tuple[Space, Response]:
        """
        Update an existing space.

        The body's ``id`` is always ``space_id``, whatever ``opt.id`` holds.
        ``opt`` itself is not modified.
        """
        body = opt.model_copy(update={"id": space_id})
        return self._http.put(
            self._build_path(space_id),
            json_data=body,
            result=Space,
            options=options,
        )

    def get(
        self,
        space_id: str,
        *options: Optional[RequestOption],
    ) -> Tuple[Space, Response]:
        """Get a single space by id."""
        return self._http.get(self._build_path(space_id), result=Space, options=options)

    def list(
        self,
        opt: Optional[GetAllSpacesOptions] = None,
        *options: Optional[RequestOption],
    ) -> Tuple[List[Space], Response]:
        """List all spaces, optionally filtered by purpose."""
        return self._http.get(self._base_path, params=opt, result=List[Space], options=options)

    def delete(
        self,
        space_id: str,
        *options: Optional[RequestOption],
    ) -> Response:
        """Delete a space and everything saved in it."""
        return self._http.delete(self._build_path(space_id), options=options)
