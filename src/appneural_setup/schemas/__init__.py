"""Schema definitions for appneural-setup."""

from .results import (
    ComposeCommand,
    HealthCheckResult,
    LocalSetupResult,
    PackageManager,
    RoleSetupResult,
)
from .role_manifest import RoleDefinition, RoleManifestFile, RoleShortcut
from .workspace_config import HistoryEntry, WorkspaceConfig

__all__ = [
    "RoleShortcut",
    "RoleDefinition",
    "RoleManifestFile",
    "HistoryEntry",
    "WorkspaceConfig",
    "RoleSetupResult",
    "HealthCheckResult",
    "LocalSetupResult",
    "PackageManager",
    "ComposeCommand",
]
