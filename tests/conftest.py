"""Pytest fixtures for role registry tests."""

from __future__ import annotations

import pytest

from roleregistry.application.use_cases.role.load_organization import load_organization
from roleregistry.config import get_settings
from roleregistry.domain.entities import Role
from roleregistry.infrastructure.persistence.memory import InMemoryRoleRepository
from roleregistry.infrastructure.seed import build_silly_penguins


@pytest.fixture
def repository() -> InMemoryRoleRepository:
    """Empty in-memory role catalog."""
    return InMemoryRoleRepository()


@pytest.fixture
def penguins(repository: InMemoryRoleRepository) -> dict[str, Role]:
    """SillyPenguins LLC roles loaded into the catalog, by name."""
    roles = load_organization(build_silly_penguins(), repository)
    return {r.name: r for r in roles}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
