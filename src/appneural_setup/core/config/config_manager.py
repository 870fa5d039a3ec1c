"""Path and settings resolution for the setup flows."""

import os
from pathlib import Path

from appneural_setup.exceptions import AppneuralError

ROLES_FILE_NAME = "appneural.roles.yaml"
CONFIG_FILE_NAME = "appneural.config.json"
DEFAULT_HEALTH_CHECK_TIMEOUT = 4.0


class ConfigurationManager:
    """Resolves workspace files, global directories and internal templates."""

    def __init__(self, workspace_root: Path | str | None = None):
        """Initialize for a workspace.

        Args:
            workspace_root: Project directory to operate on. Defaults to the
                current working directory.
        """
        self._workspace_root = (
            Path(workspace_root) if workspace_root is not None else Path.cwd()
        )
        self._global_config_dir = self._resolve_global_config_dir()
        self._cli_root = self._resolve_cli_root()

    @staticmethod
    def _resolve_global_config_dir() -> Path:
        override = os.environ.get("APPNEURAL_CONFIG_DIR")
        if override:
            return Path(override).expanduser()

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            return Path(xdg_config_home) / "appneural"
        return Path.home() / ".config" / "appneural"

    @staticmethod
    def _resolve_cli_root() -> Path:
        override = os.environ.get("APPNEURAL_CLI_ROOT")
        if override:
            return Path(override).expanduser()
        # Templates ship inside the installed package
        return Path(__file__).resolve().parent.parent.parent

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    @property
    def roles_file(self) -> Path:
        return self._workspace_root / ROLES_FILE_NAME

    @property
    def config_file(self) -> Path:
        return self._workspace_root / CONFIG_FILE_NAME

    @property
    def global_config_dir(self) -> Path:
        return self._global_config_dir

    @property
    def global_templates_dir(self) -> Path:
        return self._global_config_dir / "templates"

    @property
    def global_snippets_dir(self) -> Path:
        return self._global_config_dir / "snippets"

    @property
    def cli_root(self) -> Path:
        return self._cli_root

    @property
    def internal_template_root(self) -> Path:
        return self._cli_root / "templates"

    @property
    def internal_snippet_root(self) -> Path:
        return self.internal_template_root / "snippets"

    @property
    def health_check_timeout(self) -> float:
        """Per-endpoint HTTP timeout in seconds."""
        raw = os.environ.get("APPNEURAL_HEALTH_TIMEOUT")
        if not raw:
            return DEFAULT_HEALTH_CHECK_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError as e:
            raise AppneuralError(
                f"APPNEURAL_HEALTH_TIMEOUT must be a number of seconds, got {raw!r}"
            ) from e
        if timeout <= 0:
            raise AppneuralError("APPNEURAL_HEALTH_TIMEOUT must be positive")
        return timeout
