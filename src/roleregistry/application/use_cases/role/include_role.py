"""Include role use case."""

import logging

from roleregistry.application.ports import RoleRepository
from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class IncludeRoleUseCase:
    """Make one role inherit everything another role allows."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    def execute(self, role_name: str, included_name: str) -> Role:
        """Include included_name into role_name. Both must exist."""
        role = self._roles.get_by_name(role_name)
        if not role:
            raise NotFound("Role", role_name)
        included = self._roles.get_by_name(included_name)
        if not included:
            raise NotFound("Role", included_name)
        role.include_role(included)
        logger.info("Role %s now includes %s", role_name, included_name)
        return role
