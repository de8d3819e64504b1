"""Revoke capability use case."""

import logging

from roleregistry.application.ports import RoleRepository
from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class RevokeCapabilityUseCase:
    """Remove a direct capability from a role.

    Roles that include this one lose the capability too, unless they get it
    from somewhere else.
    """

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    def execute(self, role_name: str, capability: str) -> Role:
        role = self._roles.get_by_name(role_name)
        if not role:
            raise NotFound("Role", role_name)
        role.remove_capability(capability)
        logger.info("Revoked %s from role %s", capability, role_name)
        return role
