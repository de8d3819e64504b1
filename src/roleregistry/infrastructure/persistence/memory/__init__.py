"""In-memory role catalog."""

from roleregistry.infrastructure.persistence.memory.role_repository import (
    InMemoryRoleRepository,
)

__all__ = [
    "InMemoryRoleRepository",
]
