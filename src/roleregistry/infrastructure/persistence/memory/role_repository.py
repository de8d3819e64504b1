"""In-memory role repository implementation."""

import logging
from threading import RLock
from uuid import UUID

from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import DuplicateRole, NotFound

logger = logging.getLogger(__name__)


class InMemoryRoleRepository:
    """Role catalog keyed by id and by unique name."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}
        self._by_name: dict[str, Role] = {}
        self._lock = RLock()

    def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        with self._lock:
            return self._by_id.get(role_id)

    def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        with self._lock:
            return self._by_name.get(name)

    def list_all(self) -> list[Role]:
        """List all roles in the order they were added."""
        with self._lock:
            return list(self._by_id.values())

    def add(self, role: Role) -> Role:
        """Add role. Re-adding the same role is a no-op."""
        with self._lock:
            existing = self._by_name.get(role.name)
            if existing is role:
                return role
            if existing is not None:
                raise DuplicateRole(f"Role already exists: {role.name}")
            self._by_id[role.id] = role
            self._by_name[role.name] = role
        logger.debug("Added role %s (%s)", role.name, role.id)
        return role

    def remove(self, role_id: UUID) -> None:
        """Remove role from the catalog. Roles including it keep their edge."""
        with self._lock:
            role = self._by_id.pop(role_id, None)
            if role is None:
                raise NotFound("Role", role_id)
            self._by_name.pop(role.name, None)
        logger.debug("Removed role %s (%s)", role.name, role_id)
