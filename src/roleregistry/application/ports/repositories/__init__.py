"""Repository ports."""

from roleregistry.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "RoleRepository",
]
