from kibana_client.models.base import EntityModel, OptionsModel
from kibana_client.models.roles import (
    CreateOrUpdateRoleOptions,
    ElasticsearchIndex,
    ElasticsearchPrivileges,
    Feature,
    FieldSecurity,
    KibanaPrivilege,
    Role,
    RoleMetadata,
    TransientMetadata,
)
from kibana_client.models.spaces import (
    CreateSpaceOptions,
    GetAllSpacesOptions,
    Space,
    UpdateSpaceOptions,
)

__all__ = [
    "EntityModel",
    "OptionsModel",
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
]
