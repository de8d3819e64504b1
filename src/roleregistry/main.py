"""Application entry point and composition root."""

import argparse
import json
import logging
import sys
from pathlib import Path

import pydantic

from roleregistry import __version__
from roleregistry.application.dto.role_dto import OrganizationDefinition
from roleregistry.application.use_cases.role.get_capabilities import GetCapabilitiesUseCase
from roleregistry.application.use_cases.role.load_organization import load_organization
from roleregistry.config import Settings, get_settings
from roleregistry.domain.exceptions import RoleRegistryError
from roleregistry.infrastructure.persistence.memory import InMemoryRoleRepository
from roleregistry.infrastructure.seed import build_silly_penguins

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_organization(path: str | Path) -> OrganizationDefinition:
    """Read an organization definition from a JSON file."""
    return OrganizationDefinition.model_validate_json(Path(path).read_bytes())


def create_registry(organization: OrganizationDefinition) -> InMemoryRoleRepository:
    """Composition root - build a role catalog holding the organization's roles."""
    repository = InMemoryRoleRepository()
    load_organization(organization, repository)
    return repository


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roleregistry",
        description="Show effective capabilities of an organization's roles",
    )
    parser.add_argument("roles", nargs="*", help="Role names (default: all roles)")
    parser.add_argument("--file", type=str, default=None, help="Organization definition JSON file")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--version", action="version", version=f"roleregistry {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except pydantic.ValidationError as exc:
        print(f"error: invalid settings: {exc}", file=sys.stderr)
        return 2
    configure_logging(settings)

    path = args.file or settings.organization_file
    try:
        organization = read_organization(path) if path else build_silly_penguins()
    except (OSError, pydantic.ValidationError) as exc:
        print(f"error: cannot read organization: {exc}", file=sys.stderr)
        return 2

    try:
        repository = create_registry(organization)
        get_capabilities = GetCapabilitiesUseCase(repository)
        names = args.roles or [r.name for r in repository.list_all()]
        results = [get_capabilities.execute(name) for name in names]
    except RoleRegistryError as exc:
        logger.debug("Failed to resolve roles", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for result in results:
            print(f"{result.name} capabilities: {', '.join(result.effective_capabilities)}")
    return 0
