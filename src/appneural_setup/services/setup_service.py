"""Application service for role setup and local environment provisioning.

Both CLI commands delegate to :class:`SetupService`; the module-level
functions wrap it for callers that only have a workspace path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from appneural_setup.core.config.config_manager import ConfigurationManager
from appneural_setup.core.config.role_manifest import (
    load_default_health_checks,
    load_roles_manifest,
)
from appneural_setup.core.config.workspace_config import (
    apply_role_to_config,
    read_workspace_config,
    write_workspace_config,
)
from appneural_setup.core.local.compose import (
    detect_compose_command,
    start_docker_services,
)
from appneural_setup.core.local.env_file import generate_env_file
from appneural_setup.core.local.health import perform_health_checks
from appneural_setup.core.local.package_manager import (
    detect_package_manager,
    install_dependencies,
    run_script_if_present,
)
from appneural_setup.core.local.tools import verify_tools
from appneural_setup.core.roles.template_installer import TemplateInstaller
from appneural_setup.exceptions import ValidationError
from appneural_setup.schemas.results import (
    HealthCheckResult,
    LocalSetupResult,
    RoleSetupResult,
)
from appneural_setup.schemas.role_manifest import RoleDefinition
from appneural_setup.schemas.workspace_config import WorkspaceConfig

logger = logging.getLogger(__name__)


class SetupService:
    """Runs the role setup and local environment flows for one workspace."""

    def __init__(self, config_manager: ConfigurationManager | None = None) -> None:
        self.config_manager = config_manager or ConfigurationManager()
        self._template_installer = TemplateInstaller(self.config_manager)

    def load_roles(self) -> dict[str, RoleDefinition]:
        """Load the workspace role manifest (or the built-in defaults)."""
        return load_roles_manifest(self.config_manager)

    def get_role(self, role: str) -> RoleDefinition:
        """Look up a role definition.

        Raises:
            ValidationError: If the manifest has no such role
        """
        manifest = self.load_roles()
        definition = manifest.get(role)
        if definition is None:
            raise ValidationError(
                "APPNEURAL role not found",
                {"role": role, "supported": sorted(manifest)},
            )
        return definition

    def read_config(self) -> WorkspaceConfig:
        return read_workspace_config(self.config_manager.config_file)

    def apply_role_setup(self, role: str) -> RoleSetupResult:
        """Apply a role profile to the workspace.

        Installs the role's templates and snippets globally, merges the role
        into ``appneural.config.json`` and logs its instructions and
        shortcuts.

        Raises:
            ValidationError: If the role is unknown or a source is missing;
                nothing is written in that case
            AppneuralError: If the existing config file cannot be read; nothing
                is written in that case either
        """
        definition = self.get_role(role)
        config_file = self.config_manager.config_file
        current = read_workspace_config(config_file)

        self._template_installer.install(
            role, definition.templates, definition.snippets
        )

        write_workspace_config(
            config_file, apply_role_to_config(current, role, definition)
        )

        for index, instruction in enumerate(definition.instructions, start=1):
            logger.info("APPNEURAL role instruction %d: %s", index, instruction)

        for shortcut in definition.shortcuts:
            suffix = f" ({shortcut.description})" if shortcut.description else ""
            logger.info(
                "APPNEURAL shortcut '%s' => %s%s",
                shortcut.name,
                shortcut.command,
                suffix,
            )

        return RoleSetupResult(
            role=role,
            shortcuts=list(definition.shortcuts),
            templates=list(definition.templates),
            snippets=list(definition.snippets),
            instructions=list(definition.instructions),
        )

    def health_check_endpoints(self) -> list[str]:
        """Endpoints from the workspace config, or the built-in defaults."""
        configured = self.read_config().health_checks
        if configured:
            return list(configured)
        return load_default_health_checks()

    def perform_health_checks(self) -> list[HealthCheckResult]:
        return perform_health_checks(
            self.health_check_endpoints(), self.config_manager.health_check_timeout
        )

    def run_local_environment_setup(self) -> LocalSetupResult:
        """Provision the local development environment.

        Raises:
            AppneuralError: If a required tool is missing
            subprocess.CalledProcessError: If compose detection, dependency
                install or service startup fails
        """
        workspace_root = self.config_manager.workspace_root

        verify_tools()
        compose_command = detect_compose_command()
        manager = detect_package_manager(workspace_root)
        install_dependencies(manager, workspace_root)
        env_generated = generate_env_file(workspace_root)
        services = start_docker_services(compose_command, workspace_root)
        migrations_executed = run_script_if_present(manager, "migrate", workspace_root)
        seeders_executed = run_script_if_present(manager, "seed", workspace_root)
        health_checks = self.perform_health_checks()

        return LocalSetupResult(
            package_manager=manager,
            env_generated=env_generated,
            docker_services=services,
            migrations_executed=migrations_executed,
            seeders_executed=seeders_executed,
            health_checks=health_checks,
        )


def apply_role_setup(
    role: str, workspace_root: Path | str | None = None
) -> RoleSetupResult:
    """Apply ``role`` to the workspace (current directory by default)."""
    return SetupService(ConfigurationManager(workspace_root)).apply_role_setup(role)


def run_local_environment_setup(
    workspace_root: Path | str | None = None,
) -> LocalSetupResult:
    """Provision the local environment for the workspace."""
    return SetupService(
        ConfigurationManager(workspace_root)
    ).run_local_environment_setup()
