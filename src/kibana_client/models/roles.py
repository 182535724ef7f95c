from pydantic import ConfigDict, Field
from typing import List, Optional

from kibana_client.models.base import EntityModel, OptionsModel


class RoleMetadata(EntityModel):
    version: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TransientMetadata(EntityModel):
    enabled: bool = True


class FieldSecurity(EntityModel):
    grant: List[str] = Field(default_factory=list)
    except_: List[str] = Field(default_factory=list, alias="except")


class ElasticsearchIndex(EntityModel):
    """Privileges on a set of Elasticsearch indices."""

    names: List[str] = Field(default_factory=list)
    privileges: List[str] = Field(default_factory=list)
    field_security: Optional[FieldSecurity] = None
    query: Optional[str] = Field(None, description="Document level security query")
    allow_restricted_indices: bool = False


class ElasticsearchPrivileges(EntityModel):
    cluster: List[str] = Field(default_factory=list)
    indices: List[ElasticsearchIndex] = Field(default_factory=list)
    run_as: List[str] = Field(default_factory=list)


class Feature(EntityModel):
    """
    Feature privileges, keyed by feature id.

    The common features are declared; any other feature id is accepted as
    an extra field holding a list of privilege names.
    """

    discover: Optional[List[str]] = None
    visualize: Optional[List[str]] = None
    dashboard: Optional[List[str]] = None
    dev_tools: Optional[List[str]] = None
    advanced_settings: Optional[List[str]] = Field(None, alias="advancedSettings")
    index_patterns: Optional[List[str]] = Field(None, alias="indexPatterns")
    graph: Optional[List[str]] = None
    apm: Optional[List[str]] = None
    maps: Optional[List[str]] = None
    canvas: Optional[List[str]] = None
    infrastructure: Optional[List[str]] = None
    logs: Optional[List[str]] = None
    uptime: Optional[List[str]] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class KibanaPrivilege(EntityModel):
    base: List[str] = Field(default_factory=list)
    feature: Optional[Feature] = None
    spaces: List[str] = Field(default_factory=list)


class Role(EntityModel):
    name: str
    metadata: RoleMetadata = Field(default_factory=RoleMetadata)
    transient_metadata: TransientMetadata = Field(default_factory=TransientMetadata)
    elasticsearch: ElasticsearchPrivileges = Field(default_factory=ElasticsearchPrivileges)
    kibana: List[KibanaPrivilege] = Field(default_factory=list)


class CreateOrUpdateRoleOptions(OptionsModel):
    """
    Body of ``PUT security/role/{name}``.

    Nested models follow the same rule as the top level: only the fields
    set on them are sent.
    """

    metadata: Optional[RoleMetadata] = None
    elasticsearch: Optional[ElasticsearchPrivileges] = None
    kibana: Optional[List[KibanaPrivilege]] = None
