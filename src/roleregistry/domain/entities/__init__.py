"""Domain entities."""

from roleregistry.domain.entities.role import Role

__all__ = [
    "Role",
]
