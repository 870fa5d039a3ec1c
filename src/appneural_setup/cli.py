"""Command line interface for appneural-setup."""

from pathlib import Path

import click

from appneural_setup.cli_modules.commands.setup_commands import SetupCommands
from appneural_setup.cli_modules.utils.telemetry import (
    configure_logging,
    with_telemetry,
)


@click.group()
@click.version_option(package_name="appneural-setup")
@click.option(
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace directory to operate on (default: current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, workspace: Path | None, verbose: bool) -> None:
    """APPNEURAL - developer environment bootstrapper."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = workspace


@cli.group()
def setup() -> None:
    """APPNEURAL setup automation."""
    pass


@setup.command("role")
@click.argument("role")
@click.pass_context
def setup_role(ctx: click.Context, role: str) -> None:
    """Apply an APPNEURAL role profile from appneural.roles.yaml."""
    workspace = ctx.obj.get("workspace")
    with_telemetry("setup:role", lambda: SetupCommands.apply_role(role, workspace))


@setup.command("local")
@click.pass_context
def setup_local(ctx: click.Context) -> None:
    """Provision the local APPNEURAL development environment."""
    workspace = ctx.obj.get("workspace")
    with_telemetry("setup:local", lambda: SetupCommands.setup_local(workspace))


@setup.command("roles")
@click.pass_context
def setup_roles(ctx: click.Context) -> None:
    """List the roles available to 'setup role'."""
    workspace = ctx.obj.get("workspace")
    with_telemetry("setup:roles", lambda: SetupCommands.list_roles(workspace))


@setup.command("status")
@click.pass_context
def setup_status(ctx: click.Context) -> None:
    """Show the role and settings recorded for this workspace."""
    workspace = ctx.obj.get("workspace")
    with_telemetry("setup:status", lambda: SetupCommands.show_status(workspace))


if __name__ == "__main__":
    cli()
