"""Grant capability use case."""

import logging

from roleregistry.application.ports import RoleRepository
from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class GrantCapabilityUseCase:
    """Add a capability to a role directly."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    def execute(self, role_name: str, capability: str) -> Role:
        role = self._roles.get_by_name(role_name)
        if not role:
            raise NotFound("Role", role_name)
        role.add_capability(capability)
        logger.info("Granted %s to role %s", capability, role_name)
        return role
