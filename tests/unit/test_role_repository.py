"""Unit tests for InMemoryRoleRepository."""

import pytest

from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import DuplicateRole, NotFound
from roleregistry.infrastructure.persistence.memory import InMemoryRoleRepository


def test_add_and_get(repository: InMemoryRoleRepository) -> None:
    """Added role is found by id and by name."""
    role = repository.add(Role(name="Seagull"))
    assert repository.get_by_id(role.id) is role
    assert repository.get_by_name("Seagull") is role


def test_get_missing_returns_none(repository: InMemoryRoleRepository) -> None:
    """Unknown names return None."""
    assert repository.get_by_name("Walrus") is None


def test_add_same_role_twice_is_noop(repository: InMemoryRoleRepository) -> None:
    """Re-adding the same object keeps a single entry."""
    role = Role(name="Seagull")
    repository.add(role)
    repository.add(role)
    assert repository.list_all() == [role]


def test_add_duplicate_name_raises(repository: InMemoryRoleRepository) -> None:
    """A second role with an existing name is rejected."""
    repository.add(Role(name="Seagull"))
    with pytest.raises(DuplicateRole, match="Seagull"):
        repository.add(Role(name="Seagull"))


def test_list_all_keeps_insertion_order(repository: InMemoryRoleRepository) -> None:
    """Roles are listed in the order they were added."""
    names = ["Seagull", "Penguin", "Moderator"]
    for name in names:
        repository.add(Role(name=name))
    assert [r.name for r in repository.list_all()] == names


def test_remove_keeps_inclusion_edges(repository: InMemoryRoleRepository) -> None:
    """Removing a role from the catalog does not detach it from including roles."""
    seagull = repository.add(Role(name="Seagull"))
    seagull.add_capability("view_posts")
    penguin = repository.add(Role(name="Penguin"))
    penguin.include_role(seagull)

    repository.remove(seagull.id)

    assert repository.get_by_name("Seagull") is None
    assert repository.get_by_id(seagull.id) is None
    assert penguin.get_all_capabilities() == ["view_posts"]


def test_remove_unknown_raises(repository: InMemoryRoleRepository) -> None:
    """Removing an id that is not in the catalog raises NotFound."""
    with pytest.raises(NotFound):
        repository.remove(Role(name="Walrus").id)
