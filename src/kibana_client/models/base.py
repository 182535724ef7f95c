from pydantic import BaseModel, ConfigDict


class OptionsModel(BaseModel):
    """
    Base for request option models.

    Every field is optional. Only fields the caller sets are sent; see
    kibana_client.encoding.
    """

    model_config = ConfigDict(populate_by_name=True)


class EntityModel(BaseModel):
    """Base for values decoded from API responses."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
