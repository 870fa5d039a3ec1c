"""Pydantic model for the persisted ``appneural.config.json`` record."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from appneural_setup.schemas.role_manifest import RoleShortcut


class HistoryEntry(BaseModel):
    """One role application, in the order it happened."""

    model_config = ConfigDict(populate_by_name=True)

    role: str
    applied_at: str = Field(alias="appliedAt")


class WorkspaceConfig(BaseModel):
    """Workspace state written after each role application.

    Keys are camelCase on disk. Keys this model does not know about are
    kept and written back unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    role: str | None = None
    shortcuts: list[RoleShortcut] | None = None
    instructions: list[str] | None = None
    templates: list[str] | None = None
    snippets: list[str] | None = None
    settings: dict[str, Any] | None = None
    health_checks: list[str] | None = Field(default=None, alias="healthChecks")
    history: list[HistoryEntry] = Field(default_factory=list)
    updated_at: str | None = Field(default=None, alias="updatedAt")

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with on-disk key names.

        Known fields left as None are omitted; unknown keys are written back
        as read, including null values.
        """
        data = self.model_dump(by_alias=True, exclude_none=True)
        data.update(self.model_extra or {})
        return data
