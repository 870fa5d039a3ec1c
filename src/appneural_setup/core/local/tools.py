"""CLI tool availability checks."""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from appneural_setup.exceptions import AppneuralError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolRequirement:
    """A command-line tool the local environment depends on."""

    name: str
    args: tuple[str, ...] = ("--version",)
    required: bool = True


REQUIRED_TOOLS: tuple[ToolRequirement, ...] = (
    ToolRequirement("node"),
    ToolRequirement("npm"),
    ToolRequirement("pnpm", required=False),
    ToolRequirement("yarn", required=False),
    ToolRequirement("docker"),
)


def is_command_available(command: str, args: Sequence[str] = ("--version",)) -> bool:
    """Return True if ``command`` runs and exits with status 0.

    Output is captured so probes stay quiet.
    """
    try:
        subprocess.run([command, *args], check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError):
        return False
    return True


def verify_tools(
    tools: Sequence[ToolRequirement] = REQUIRED_TOOLS,
) -> dict[str, bool]:
    """Check every tool in order.

    Returns:
        Availability per tool name

    Raises:
        AppneuralError: On the first required tool that is unavailable
    """
    availability: dict[str, bool] = {}
    for tool in tools:
        available = is_command_available(tool.name, tool.args)
        if not available and tool.required:
            raise AppneuralError(f"APPNEURAL requires {tool.name} to be installed")
        if not available:
            logger.warning("APPNEURAL optional tool missing: %s", tool.name)
        availability[tool.name] = available
    return availability
