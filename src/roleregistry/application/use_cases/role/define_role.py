"""Define role use case."""

import logging

from roleregistry.application.dto.role_dto import RoleDefinition
from roleregistry.application.ports import RoleRepository
from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import DuplicateRole, NotFound

logger = logging.getLogger(__name__)


class DefineRoleUseCase:
    """Create a role with its capabilities and inclusions and add it to the catalog."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    def execute(self, definition: RoleDefinition) -> Role:
        """Define role. Every included role must already be in the catalog."""
        if self._roles.get_by_name(definition.name):
            raise DuplicateRole(f"Role already exists: {definition.name}")

        included = []
        for name in definition.includes:
            other = self._roles.get_by_name(name)
            if not other:
                raise NotFound("Role", name)
            included.append(other)

        role = Role(name=definition.name, description=definition.description)
        for capability in definition.capabilities:
            role.add_capability(capability)
        for other in included:
            role.include_role(other)

        self._roles.add(role)
        logger.info(
            "Defined role %s with %d capabilities, including %s",
            role.name,
            len(role.capabilities),
            [r.name for r in role.included_roles],
        )
        return role
