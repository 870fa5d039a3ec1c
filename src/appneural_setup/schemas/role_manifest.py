"""Pydantic models for role manifests.

The same models parse the embedded default role table and a user-supplied
``appneural.roles.yaml``, so both sources share one schema.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class RoleShortcut(BaseModel):
    """A named command alias registered for a role."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    command: str
    description: str | None = None


class RoleDefinition(BaseModel):
    """Templates, snippets, shortcuts and settings that make up a role."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    description: str | None = None
    shortcuts: list[RoleShortcut] = Field(default_factory=list)
    templates: list[str] = Field(default_factory=list)
    snippets: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator(
        "shortcuts", "templates", "snippets", "instructions", "config", mode="before"
    )
    @classmethod
    def _empty_when_null(cls, value: Any, info: ValidationInfo) -> Any:
        # YAML renders a bare "templates:" key as null
        if value is None:
            return {} if info.field_name == "config" else []
        return value

    @field_validator("config")
    @classmethod
    def _health_checks_are_urls(cls, value: dict[str, Any]) -> dict[str, Any]:
        checks = value.get("healthChecks")
        if checks is not None and (
            not isinstance(checks, list)
            or not all(isinstance(url, str) for url in checks)
        ):
            raise ValueError("healthChecks must be a list of URL strings")
        return value

    @property
    def health_checks(self) -> list[str] | None:
        """Health-check URLs declared in the role config, if any."""
        value = self.config.get("healthChecks")
        if value is None:
            return None
        return list(value)


class RoleManifestFile(BaseModel):
    """Top-level shape of a manifest YAML document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    version: int | None = None
    default_health_checks: list[str] = Field(
        default_factory=list, alias="defaultHealthChecks"
    )
    roles: dict[str, RoleDefinition] | None = None
