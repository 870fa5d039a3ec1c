"""Role manifest loading.

A workspace may provide ``appneural.roles.yaml`` with a top-level ``roles``
mapping. When that file is missing or defines no roles, the embedded default
table is used. Both go through :func:`parse_roles_manifest`.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from appneural_setup.core.config.config_manager import ConfigurationManager
from appneural_setup.exceptions import ValidationError
from appneural_setup.schemas.role_manifest import RoleDefinition, RoleManifestFile

logger = logging.getLogger(__name__)

DEFAULT_ROLES_PATH = (
    Path(__file__).resolve().parent.parent.parent / "data" / "default-roles.yaml"
)


def parse_roles_manifest(raw: str, source: str) -> RoleManifestFile:
    """Parse manifest YAML text into a validated manifest.

    Args:
        raw: YAML document text
        source: Where the text came from, used in error context

    Returns:
        Parsed manifest; ``roles`` is None when the document has no roles

    Raises:
        yaml.YAMLError: If the document is not valid YAML
        ValidationError: If a role entry does not match the role schema
    """
    document: Any = yaml.safe_load(raw)
    if not isinstance(document, dict):
        return RoleManifestFile()

    roles_data = document.get("roles") or {}
    if not isinstance(roles_data, dict):
        raise ValidationError(
            "APPNEURAL roles manifest 'roles' must be a mapping",
            {"source": source},
        )

    roles: dict[str, RoleDefinition] = {}
    for role_name, role_data in roles_data.items():
        try:
            roles[str(role_name)] = RoleDefinition.model_validate(role_data or {})
        except PydanticValidationError as e:
            raise ValidationError(
                "APPNEURAL role definition invalid",
                {"role": role_name, "source": source, "errors": e.errors()},
            ) from e

    header = {key: value for key, value in document.items() if key != "roles"}
    try:
        manifest = RoleManifestFile.model_validate(header)
    except PydanticValidationError as e:
        raise ValidationError(
            "APPNEURAL roles manifest invalid",
            {"source": source, "errors": e.errors()},
        ) from e
    return manifest.model_copy(update={"roles": roles or None})


def load_default_manifest() -> RoleManifestFile:
    """Load the embedded default role table."""
    raw = DEFAULT_ROLES_PATH.read_text(encoding="utf-8")
    return parse_roles_manifest(raw, str(DEFAULT_ROLES_PATH))


def load_default_roles() -> dict[str, RoleDefinition]:
    """Return the built-in role definitions."""
    return dict(load_default_manifest().roles or {})


def load_default_health_checks() -> list[str]:
    """Return the built-in health-check endpoints."""
    return list(load_default_manifest().default_health_checks)


def load_roles_manifest(
    config_manager: ConfigurationManager | None = None,
) -> dict[str, RoleDefinition]:
    """Load the role manifest for the workspace.

    Args:
        config_manager: Resolves the workspace roles file. A manager for
            the current directory is created when omitted.

    Returns:
        Mapping from role name to definition
    """
    config_manager = config_manager or ConfigurationManager()
    roles_file = config_manager.roles_file

    if not roles_file.exists():
        return load_default_roles()

    raw = roles_file.read_text(encoding="utf-8")
    manifest = parse_roles_manifest(raw, str(roles_file))
    if not manifest.roles:
        logger.debug("%s defines no roles, using built-in defaults", roles_file)
        return load_default_roles()

    return dict(manifest.roles)
