"""Container service startup through docker compose."""

import subprocess
from pathlib import Path

from appneural_setup.schemas.results import ComposeCommand

DOCKER_SERVICES: tuple[str, ...] = ("db", "redis", "mq")


def detect_compose_command() -> ComposeCommand:
    """Return which compose variant is installed.

    ``docker compose`` is preferred; ``docker-compose`` is tried when the
    plugin is unavailable.

    Raises:
        subprocess.CalledProcessError: If neither variant works
        FileNotFoundError: If docker-compose is not installed either
    """
    try:
        subprocess.run(
            ["docker", "compose", "version"], check=True, capture_output=True
        )
        return "docker"
    except (OSError, subprocess.CalledProcessError):
        subprocess.run(["docker-compose", "--version"], check=True, capture_output=True)
        return "docker-compose"


def compose_up_command(
    compose_command: ComposeCommand, services: tuple[str, ...] = DOCKER_SERVICES
) -> list[str]:
    """Build the detached ``up`` command for the given variant."""
    if compose_command == "docker":
        return ["docker", "compose", "up", "-d", *services]
    return ["docker-compose", "up", "-d", *services]


def start_docker_services(
    compose_command: ComposeCommand, workspace_root: Path
) -> list[str]:
    """Start the db, redis and mq services in the background.

    Returns:
        Names of the started services

    Raises:
        subprocess.CalledProcessError: If compose exits non-zero
    """
    subprocess.run(
        compose_up_command(compose_command), cwd=workspace_root, check=True
    )
    return list(DOCKER_SERVICES)
