from pydantic import Field
from typing import List, Optional

from kibana_client.models.base import EntityModel, OptionsModel


class Space(EntityModel):
    id: str = Field(description="Space identifier, used in URLs")
    name: str = Field(description="Display name")
    description: Optional[str] = Field(None, description="Space description")
    color: Optional[str] = Field(None, description="Avatar color as a hex code")
    initials: Optional[str] = Field(None, description="Avatar initials")
    disabled_features: List[str] = Field(
        default_factory=list,
        alias="disabledFeatures",
        description="Feature ids hidden in this space",
    )
    image_url: Optional[str] = Field(None, alias="imageUrl", description="Avatar image data URL")


class CreateSpaceOptions(OptionsModel):
    id: Optional[str] = Field(None, description="Space identifier (required by the API)")
    name: Optional[str] = Field(None, description="Display name (required by the API)")
    description: Optional[str] = None
    color: Optional[str] = None
    initials: Optional[str] = None
    disabled_features: Optional[List[str]] = Field(None, alias="disabledFeatures")
    image_url: Optional[str] = Field(None, alias="imageUrl")


class UpdateSpaceOptions(CreateSpaceOptions):
    """Same fields as CreateSpaceOptions; ``id`` is always taken from the path."""


class GetAllSpacesOptions(OptionsModel):
    purpose: Optional[str] = Field(
        None,
        description="any, copySavedObjectsIntoSpace or shareSavedObjectsIntoSpace",
    )
    include_authorized_purpose: Optional[bool] = Field(
        None,
        description="Report which purposes the user is authorized for",
    )
