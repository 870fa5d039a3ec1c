"""Tests for path and settings resolution."""

from pathlib import Path

import pytest

from appneural_setup.core.config.config_manager import ConfigurationManager
from appneural_setup.exceptions import AppneuralError


class TestConfigurationManagerPaths:
    """Workspace and global path resolution."""

    def test_workspace_files(self, workspace: Path) -> None:
        manager = ConfigurationManager(workspace)

        assert manager.workspace_root == workspace
        assert manager.roles_file == workspace / "appneural.roles.yaml"
        assert manager.config_file == workspace / "appneural.config.json"

    def test_defaults_to_current_directory(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(workspace)

        assert ConfigurationManager().workspace_root == workspace

    def test_global_dir_from_override(
        self, isolated_global_config: Path, workspace: Path
    ) -> None:
        manager = ConfigurationManager(workspace)

        assert manager.global_config_dir == isolated_global_config
        assert manager.global_templates_dir == isolated_global_config / "templates"
        assert manager.global_snippets_dir == isolated_global_config / "snippets"

    def test_global_dir_from_xdg(
        self, tmp_path: Path, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("APPNEURAL_CONFIG_DIR")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        manager = ConfigurationManager(workspace)

        assert manager.global_config_dir == tmp_path / "xdg" / "appneural"

    def test_global_dir_falls_back_to_home(
        self, tmp_path: Path, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("APPNEURAL_CONFIG_DIR")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))

        manager = ConfigurationManager(workspace)

        assert manager.global_config_dir == tmp_path / "home" / ".config" / "appneural"

    def test_internal_templates_ship_with_package(self, workspace: Path) -> None:
        manager = ConfigurationManager(workspace)

        assert manager.internal_template_root.is_dir()
        assert (manager.internal_snippet_root / "database-connection.md").is_file()

    def test_cli_root_override(self, workspace: Path, cli_root: Path) -> None:
        manager = ConfigurationManager(workspace)

        assert manager.internal_template_root == cli_root / "templates"
        assert manager.internal_snippet_root == cli_root / "templates" / "snippets"


class TestHealthCheckTimeout:
    """Health-check timeout setting."""

    def test_default_is_four_seconds(self, workspace: Path) -> None:
        assert ConfigurationManager(workspace).health_check_timeout == 4.0

    def test_environment_override(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APPNEURAL_HEALTH_TIMEOUT", "1.5")

        assert ConfigurationManager(workspace).health_check_timeout == 1.5

    @pytest.mark.parametrize("raw", ["soon", "0", "-2"])
    def test_invalid_values_rejected(
        self, raw: str, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APPNEURAL_HEALTH_TIMEOUT", raw)

        with pytest.raises(AppneuralError, match="APPNEURAL_HEALTH_TIMEOUT"):
            _ = ConfigurationManager(workspace).health_check_timeout
