"""Package manager detection and invocation."""

import logging
import subprocess
from pathlib import Path

from appneural_setup.core.local.tools import is_command_available
from appneural_setup.schemas.results import PackageManager

logger = logging.getLogger(__name__)

PNPM_LOCKFILE = "pnpm-lock.yaml"
YARN_LOCKFILE = "yarn.lock"


def detect_package_manager(workspace_root: Path) -> PackageManager:
    """Pick the package manager for a workspace.

    The lockfile decides which manager is wanted; the binary being missing
    only makes it fall back to npm.
    """
    if (workspace_root / PNPM_LOCKFILE).exists():
        return "pnpm" if is_command_available("pnpm") else "npm"
    if (workspace_root / YARN_LOCKFILE).exists():
        return "yarn" if is_command_available("yarn") else "npm"
    return "npm"


def install_dependencies(manager: PackageManager, workspace_root: Path) -> None:
    """Run ``<manager> install`` with the terminal attached.

    Raises:
        subprocess.CalledProcessError: If the install exits non-zero
    """
    subprocess.run([manager, "install"], cwd=workspace_root, check=True)


def script_command(manager: PackageManager, script: str) -> list[str]:
    """Build the command that runs a package script if it is defined."""
    if manager == "yarn":
        return ["yarn", "run", script]
    return [manager, "run", script, "--if-present"]


def run_script_if_present(
    manager: PackageManager, script: str, workspace_root: Path
) -> bool:
    """Run a package script, treating any failure as a skipped step.

    Returns:
        True if the script ran successfully, False otherwise
    """
    try:
        subprocess.run(
            script_command(manager, script), cwd=workspace_root, check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning("APPNEURAL script '%s' not available: %s", script, e)
        return False
    return True
