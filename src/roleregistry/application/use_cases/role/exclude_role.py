"""Exclude role use case."""

import logging

from roleregistry.application.ports import RoleRepository
from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class ExcludeRoleUseCase:
    """Remove an inclusion edge between two roles."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    def execute(self, role_name: str, excluded_name: str) -> Role:
        """Exclude excluded_name from role_name. The excluded role stays in the catalog."""
        role = self._roles.get_by_name(role_name)
        if not role:
            raise NotFound("Role", role_name)
        excluded = self._roles.get_by_name(excluded_name)
        if not excluded:
            raise NotFound("Role", excluded_name)
        role.exclude_role(excluded)
        logger.info("Role %s no longer includes %s", role_name, excluded_name)
        return role
