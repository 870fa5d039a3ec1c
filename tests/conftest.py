"""Shared test fixtures and configuration."""

from collections.abc import Generator
from pathlib import Path

import pytest

from appneural_setup.core.config.config_manager import ConfigurationManager


@pytest.fixture(autouse=True)
def isolated_global_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point the global config directory at a temporary path for every test.

    Keeps tests from writing templates and snippets into the real
    ~/.config/appneural.
    """
    global_dir = tmp_path / "global-config"
    monkeypatch.setenv("APPNEURAL_CONFIG_DIR", str(global_dir))
    monkeypatch.delenv("APPNEURAL_CLI_ROOT", raising=False)
    monkeypatch.delenv("APPNEURAL_HEALTH_TIMEOUT", raising=False)
    yield global_dir


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def config_manager(workspace: Path) -> ConfigurationManager:
    return ConfigurationManager(workspace)


@pytest.fixture
def cli_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Internal template root with one template and one snippet.

    Layout::

        cli-root/templates/api/basic/main.ts
        cli-root/templates/api/basic/nested/util.ts
        cli-root/templates/snippets/db.md
    """
    root = tmp_path / "cli-root"
    template_dir = root / "templates" / "api" / "basic"
    (template_dir / "nested").mkdir(parents=True)
    (template_dir / "main.ts").write_text("export const main = 1;\n")
    (template_dir / "nested" / "util.ts").write_text("export const util = 2;\n")

    snippet_dir = root / "templates" / "snippets"
    snippet_dir.mkdir(parents=True)
    (snippet_dir / "db.md").write_text("# Database\n")

    monkeypatch.setenv("APPNEURAL_CLI_ROOT", str(root))
    return root
