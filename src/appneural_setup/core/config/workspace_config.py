"""Reading, merging and writing ``appneural.config.json``."""

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from appneural_setup.exceptions import AppneuralError
from appneural_setup.schemas.role_manifest import RoleDefinition
from appneural_setup.schemas.workspace_config import HistoryEntry, WorkspaceConfig


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def read_workspace_config(file_path: Path) -> WorkspaceConfig:
    """Load the persisted workspace config.

    Args:
        file_path: Path to the JSON config file

    Returns:
        Parsed config, or an empty record if the file does not exist

    Raises:
        AppneuralError: If the file cannot be read or parsed
    """
    if not file_path.exists():
        return WorkspaceConfig()

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise AppneuralError(f"Failed to parse config file {file_path}: {e}") from e
    except OSError as e:
        raise AppneuralError(f"Failed to read config file {file_path}: {e}") from e

    try:
        return WorkspaceConfig.model_validate(data)
    except PydanticValidationError as e:
        raise AppneuralError(f"Invalid config file {file_path}: {e}") from e


def write_workspace_config(file_path: Path, config: WorkspaceConfig) -> None:
    """Overwrite the config file atomically.

    The JSON is written to a temporary file in the same directory and then
    renamed over the target.

    Raises:
        AppneuralError: If the file cannot be written
    """
    content = json.dumps(config.to_json_dict(), indent=2)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(temp_name, file_path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise AppneuralError(f"Failed to write config file {file_path}: {e}") from e


def apply_role_to_config(
    current: WorkspaceConfig,
    role: str,
    definition: RoleDefinition,
    applied_at: str | None = None,
) -> WorkspaceConfig:
    """Merge a role application into the persisted config.

    Shortcuts, instructions, templates and snippets are replaced by the
    role's values. Settings are merged shallowly with the role's config
    winning. Health checks fall back to the previous value when the role
    declares none. History gains one entry.

    Args:
        current: Config as read from disk
        role: Name of the applied role
        definition: The role's definition
        applied_at: Timestamp to record, defaults to now

    Returns:
        New config; ``current`` is not modified
    """
    timestamp = applied_at or utc_timestamp()
    health_checks = definition.health_checks
    if health_checks is None:
        health_checks = current.health_checks

    return current.model_copy(
        update={
            "role": role,
            "shortcuts": list(definition.shortcuts),
            "instructions": list(definition.instructions),
            "templates": list(definition.templates),
            "snippets": list(definition.snippets),
            "settings": {**(current.settings or {}), **definition.config},
            "health_checks": health_checks,
            "history": [
                *current.history,
                HistoryEntry(role=role, applied_at=timestamp),
            ],
            "updated_at": timestamp,
        }
    )
