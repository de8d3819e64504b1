"""Domain exceptions."""


class RoleRegistryError(Exception):
    """Base exception for the role registry."""

    pass


class CyclicInclusionError(RoleRegistryError):
    """Role inclusion graph contains a cycle reachable from the queried role."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("Cyclic role inclusion: " + " -> ".join(self.cycle))


class NotFound(RoleRegistryError):
    """Requested resource was not found."""

    def __init__(self, kind: str, key: object) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")


class DuplicateRole(RoleRegistryError):
    """Role with the same name already exists in the catalog."""

    pass


class ValidationError(RoleRegistryError):
    """Validation failed for input data."""

    pass
