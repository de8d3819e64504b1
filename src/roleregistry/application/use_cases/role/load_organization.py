"""Load organization use case."""

import logging

from roleregistry.application.dto.role_dto import OrganizationDefinition, RoleDefinition
from roleregistry.application.ports import RoleRepository
from roleregistry.application.use_cases.role.define_role import DefineRoleUseCase
from roleregistry.domain.entities import Role
from roleregistry.domain.exceptions import CyclicInclusionError, DuplicateRole, NotFound

logger = logging.getLogger(__name__)


def load_organization(
    organization: OrganizationDefinition,
    role_repository: RoleRepository,
) -> list[Role]:
    """Define every role of an organization, included roles first.

    Includes may point at roles of the same definition or at roles already in
    the catalog. Returns the defined roles in definition order.
    """
    by_name: dict[str, RoleDefinition] = {}
    for definition in organization.roles:
        if definition.name in by_name:
            raise DuplicateRole(f"Role defined twice: {definition.name}")
        by_name[definition.name] = definition

    for name in by_name:
        if role_repository.get_by_name(name):
            raise DuplicateRole(f"Role already exists: {name}")

    ordered: list[RoleDefinition] = []
    done: set[str] = set()
    for root in organization.roles:
        if root.name in done:
            continue
        path = [root.name]
        pending = [iter(root.includes)]
        while pending:
            for name in pending[-1]:
                if name not in by_name:
                    if not role_repository.get_by_name(name):
                        raise NotFound("Role", name)
                    continue
                if name in done:
                    continue
                if name in path:
                    raise CyclicInclusionError(path[path.index(name) :] + [name])
                path.append(name)
                pending.append(iter(by_name[name].includes))
                break
            else:
                pending.pop()
                name = path.pop()
                done.add(name)
                ordered.append(by_name[name])

    define_role = DefineRoleUseCase(role_repository)
    defined = {d.name: define_role.execute(d) for d in ordered}
    logger.info("Loaded organization %s with %d roles", organization.name, len(defined))
    return [defined[d.name] for d in organization.roles]
