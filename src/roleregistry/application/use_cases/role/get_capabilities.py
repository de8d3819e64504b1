"""Get effective capabilities use case."""

from roleregistry.application.dto.role_dto import RoleCapabilities
from roleregistry.application.ports import RoleRepository
from roleregistry.domain.exceptions import NotFound


class GetCapabilitiesUseCase:
    """Resolve a role's direct and effective capabilities."""

    def __init__(self, role_repository: RoleRepository) -> None:
        self._roles = role_repository

    def execute(self, role_name: str) -> RoleCapabilities:
        role = self._roles.get_by_name(role_name)
        if not role:
            raise NotFound("Role", role_name)
        return RoleCapabilities(
            name=role.name,
            capabilities=list(role.capabilities),
            included_roles=[r.name for r in role.included_roles],
            effective_capabilities=role.get_all_capabilities(),
        )
