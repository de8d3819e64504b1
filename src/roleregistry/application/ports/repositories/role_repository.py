"""Role repository port."""

from typing import Protocol
from uuid import UUID

from roleregistry.domain.entities import Role


class RoleRepository(Protocol):
    """Port for one organization's role catalog."""

    def get_by_id(self, role_id: UUID) -> Role | None: ...

    def get_by_name(self, name: str) -> Role | None: ...

    def list_all(self) -> list[Role]: ...

    def add(self, role: Role) -> Role: ...

    def remove(self, role_id: UUID) -> None: ...
