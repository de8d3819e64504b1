"""Role entity - direct capabilities, included roles and their closure."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from threading import RLock
from uuid import UUID, uuid4

from roleregistry.domain.exceptions import CyclicInclusionError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Role:
    """Named role with direct capabilities and non-owning links to included roles.

    Equality and hashing are by identity. Included roles are keyed by ``id``,
    so including the same role twice is a no-op even if another role shares
    its name.
    """

    name: str
    description: str = ""
    id: UUID = field(default_factory=uuid4)
    _capabilities: dict[str, None] = field(default_factory=dict, init=False, repr=False)
    _included: dict[UUID, "Role"] = field(default_factory=dict, init=False, repr=False)
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError("Role name must be a non-empty string")

    def __setattr__(self, attr: str, value: object) -> None:
        # Catalogs index roles by name, so it is fixed once set.
        if attr == "name" and "name" in self.__dict__:
            raise ValidationError("Role name cannot be changed")
        super().__setattr__(attr, value)

    @property
    def capabilities(self) -> tuple[str, ...]:
        """Direct capabilities, in the order they were added."""
        with self._lock:
            return tuple(self._capabilities)

    @property
    def included_roles(self) -> tuple["Role", ...]:
        """Directly included roles, in the order they were included."""
        with self._lock:
            return tuple(self._included.values())

    def add_capability(self, capability: str) -> None:
        """Add capability if absent."""
        _check_capability(capability)
        with self._lock:
            self._capabilities.setdefault(capability, None)

    def remove_capability(self, capability: str) -> None:
        """Remove capability if present."""
        _check_capability(capability)
        with self._lock:
            self._capabilities.pop(capability, None)

    def include_role(self, role: "Role") -> None:
        """Include role if not already included. Cycles are not checked here."""
        _check_role(role)
        with self._lock:
            self._included.setdefault(role.id, role)

    def exclude_role(self, role: "Role") -> None:
        """Drop the inclusion edge to role if present. The role itself is untouched."""
        _check_role(role)
        with self._lock:
            self._included.pop(role.id, None)

    def get_all_capabilities(self) -> list[str]:
        """Effective capabilities: own plus those of every transitively included role.

        Duplicates are collapsed and the first-seen depth-first order is kept.
        Raises CyclicInclusionError if a cycle is reachable from this role.
        """
        collected: dict[str, None] = {}
        finished: set[UUID] = set()
        path: list[Role] = []
        on_path: dict[UUID, int] = {}
        pending: list[Iterator[Role]] = []

        def enter(role: Role) -> None:
            # Snapshot under one lock at a time; never hold two role locks at once.
            with role._lock:
                own = list(role._capabilities)
                included = list(role._included.values())
            for capability in own:
                collected.setdefault(capability, None)
            on_path[role.id] = len(path)
            path.append(role)
            pending.append(iter(included))

        enter(self)
        while pending:
            for role in pending[-1]:
                if role.id in finished:
                    continue
                if role.id in on_path:
                    cycle = [r.name for r in path[on_path[role.id] :]] + [role.name]
                    logger.warning("Cyclic inclusion detected: %s", " -> ".join(cycle))
                    raise CyclicInclusionError(cycle)
                enter(role)
                break
            else:
                pending.pop()
                done = path.pop()
                del on_path[done.id]
                finished.add(done.id)

        return list(collected)


def _check_capability(capability: str) -> None:
    if not isinstance(capability, str) or not capability:
        raise ValidationError("Capability must be a non-empty string")


def _check_role(role: Role) -> None:
    if not isinstance(role, Role):
        raise ValidationError(f"Expected Role, got {type(role).__name__}")
