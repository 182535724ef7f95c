"""
Kibana Client Library.

A typed HTTP client for the Kibana spaces and role management API.

Example usage:
    ```python
    from kibana_client import KibanaClient, CreateSpaceOptions, with_base_url

    client = KibanaClient.from_api_key("base64-key", with_base_url("https://kibana:5601"))

    space, response = client.spaces.create(CreateSpaceOptions(id="s1", name="S1"))
    spaces, response = client.spaces.list()
    response = client.spaces.delete("s1")
    ```
"""

__version__ = "0.1.0"

# Main client
from kibana_client.client import KibanaClient

# Credentials
from kibana_client.auth import APIKey, BasicAuth, Credential

# Configuration
from kibana_client.options import (
    ClientConfig,
    with_base_url,
    with_http_client,
    with_timeout,
    with_user_agent,
)

# Request customizers
from kibana_client.request_options import with_header, with_headers, with_space

# HTTP layer (for advanced usage)
from kibana_client.http import HTTPClient, Response
from kibana_client.errors_parser import parse_error

# Models
from kibana_client.models import (
    CreateOrUpdateRoleOptions,
    CreateSpaceOptions,
    ElasticsearchIndex,
    ElasticsearchPrivileges,
    Feature,
    FieldSecurity,
    GetAllSpacesOptions,
    KibanaPrivilege,
    Role,
    RoleMetadata,
    Space,
    TransientMetadata,
    UpdateSpaceOptions,
)

# Exceptions
from kibana_client.exceptions import (
    KibanaClientError,
    ConfigurationError,
    RequestBuildError,
    InvalidPathError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    DecodeError,
    ErrorResponse,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    ServerError,
)

__all__ = [
    "__version__",
    "KibanaClient",
    "APIKey",
    "BasicAuth",
    "Credential",
    "ClientConfig",
    "with_base_url",
    "with_http_client",
    "with_timeout",
    "with_user_agent",
    "with_header",
    "with_headers",
    "with_space",
    "HTTPClient",
    "Response",
    "parse_error",
    "Space",
    "CreateSpaceOptions",
    "UpdateSpaceOptions",
    "GetAllSpacesOptions",
    "Role",
    "RoleMetadata",
    "TransientMetadata",
    "ElasticsearchPrivileges",
    "ElasticsearchIndex",
    "FieldSecurity",
    "KibanaPrivilege",
    "Feature",
    "CreateOrUpdateRoleOptions",
    "KibanaClientError",
    "ConfigurationError",
    "RequestBuildError",
    "InvalidPathError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "DecodeError",
    "ErrorResponse",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
]
