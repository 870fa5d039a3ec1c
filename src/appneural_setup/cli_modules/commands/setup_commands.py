"""Setup CLI command implementations."""

from pathlib import Path

import click

from appneural_setup.cli_modules.utils.cli_utils import (
    echo_info,
    echo_success,
    echo_warning,
    with_spinner,
)
from appneural_setup.core.config.config_manager import ConfigurationManager
from appneural_setup.exceptions import ValidationError
from appneural_setup.services.setup_service import SetupService


def _service(workspace: Path | None) -> SetupService:
    return SetupService(ConfigurationManager(workspace))


class SetupCommands:
    """Role and local environment setup commands."""

    @staticmethod
    def apply_role(role: str, workspace: Path | None = None) -> None:
        """Apply a role profile and print what it registered."""
        service = _service(workspace)

        supported = sorted(service.load_roles())
        if role not in supported:
            raise ValidationError(
                "APPNEURAL role unsupported", {"role": role, "supported": supported}
            )

        result = with_spinner(
            "Configuring APPNEURAL role", lambda: service.apply_role_setup(role)
        )
        echo_success(f"APPNEURAL role '{result.role}' applied")
        templates = ", ".join(result.templates) or "none"
        snippets = ", ".join(result.snippets) or "none"
        echo_info(f"APPNEURAL templates loaded: {templates}")
        echo_info(f"APPNEURAL snippets loaded: {snippets}")
        echo_info(f"APPNEURAL shortcuts registered: {len(result.shortcuts)}")

    @staticmethod
    def setup_local(workspace: Path | None = None) -> None:
        """Provision the local environment and print a summary."""
        service = _service(workspace)

        summary = with_spinner(
            "Bootstrapping APPNEURAL local environment",
            service.run_local_environment_setup,
            spinner="bouncingBar",
        )

        echo_success(f"APPNEURAL dependencies installed via {summary.package_manager}")
        echo_info(
            "APPNEURAL .env generated: "
            f"{'yes' if summary.env_generated else 'no source'}"
        )
        echo_info(f"APPNEURAL docker services: {', '.join(summary.docker_services)}")
        echo_info(
            "APPNEURAL migrations: "
            f"{'executed' if summary.migrations_executed else 'skipped'}, "
            f"seeders: {'executed' if summary.seeders_executed else 'skipped'}"
        )
        for check in summary.health_checks:
            state = "healthy" if check.healthy else "unavailable"
            status = f" (status {check.status})" if check.status else ""
            message = f"APPNEURAL health {check.url} => {state}{status}"
            if check.healthy:
                echo_info(message)
            else:
                echo_warning(message)
        echo_success("APPNEURAL local environment ready")

    @staticmethod
    def list_roles(workspace: Path | None = None) -> None:
        """List roles available in the workspace manifest."""
        service = _service(workspace)
        roles = service.load_roles()

        source = (
            service.config_manager.roles_file.name
            if service.config_manager.roles_file.exists()
            else "built-in defaults"
        )
        click.echo(f"Available roles ({source}):")
        for name, definition in roles.items():
            if definition.description:
                click.echo(f"  {name} - {definition.description}")
            else:
                click.echo(f"  {name}")

    @staticmethod
    def show_status(workspace: Path | None = None) -> None:
        """Show the persisted workspace configuration."""
        service = _service(workspace)
        config_file = service.config_manager.config_file

        click.echo("APPNEURAL Workspace Status:")
        click.echo(f"Config: {config_file}")

        if not config_file.exists():
            click.echo("Status: no role applied")
            echo_info("Run 'appneural setup role <role>' to apply one")
            return

        config = service.read_config()
        click.echo(f"Role: {config.role or 'none'}")
        stack = (config.settings or {}).get("stack")
        if stack:
            click.echo(f"Stack: {stack}")
        click.echo(f"Templates: {', '.join(config.templates or []) or 'none'}")
        click.echo(f"Snippets: {', '.join(config.snippets or []) or 'none'}")

        if config.shortcuts:
            click.echo("Shortcuts:")
            for shortcut in config.shortcuts:
                click.echo(f"  {shortcut.name} => {shortcut.command}")

        health_checks = config.health_checks or []
        click.echo(f"Health checks: {', '.join(health_checks) or 'defaults'}")

        click.echo(f"Roles applied: {len(config.history)}")
        if config.history:
            last = config.history[-1]
            click.echo(f"Last applied: {last.role} at {last.applied_at}")
