"""Application ports - interfaces for external adapters."""

from roleregistry.application.ports.repositories import RoleRepository

__all__ = [
    "RoleRepository",
]
