"""Role DTOs."""

from dataclasses import asdict, dataclass
from typing import Annotated

from pydantic import BaseModel, Field

NonEmptyStr = Annotated[str, Field(min_length=1)]


class RoleDefinition(BaseModel):
    """Input for defining a role: direct capabilities and included role names."""

    name: str = Field(min_length=1, description="Role name, unique within the organization")
    description: str = Field(default="", description="Free text description")
    capabilities: list[NonEmptyStr] = Field(default_factory=list, description="Direct capabilities")
    includes: list[NonEmptyStr] = Field(default_factory=list, description="Names of included roles")


class OrganizationDefinition(BaseModel):
    """Input for loading a whole organization's roles at once."""

    name: str = Field(min_length=1, description="Organization name")
    roles: list[RoleDefinition] = Field(default_factory=list)


@dataclass
class RoleCapabilities:
    """Output DTO for a role and its effective capabilities."""

    name: str
    capabilities: list[str]
    included_roles: list[str]
    effective_capabilities: list[str]

    def to_dict(self) -> dict:
        return asdict(self)
