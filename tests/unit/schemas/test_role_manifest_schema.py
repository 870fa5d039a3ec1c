"""Tests for role manifest and workspace config models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from appneural_setup.exceptions import ValidationError
from appneural_setup.schemas.results import HealthCheckResult
from appneural_setup.schemas.role_manifest import RoleDefinition, RoleShortcut
from appneural_setup.schemas.workspace_config import HistoryEntry, WorkspaceConfig


class TestRoleDefinition:
    def test_defaults(self) -> None:
        role = RoleDefinition()

        assert role.description is None
        assert role.shortcuts == []
        assert role.templates == []
        assert role.config == {}
        assert role.health_checks is None

    def test_is_frozen(self) -> None:
        role = RoleDefinition(description="x")

        with pytest.raises(PydanticValidationError):
            role.description = "y"  # type: ignore[misc]

    def test_shortcut_requires_command(self) -> None:
        with pytest.raises(PydanticValidationError):
            RoleShortcut.model_validate({"name": "svc"})

    def test_shortcut_rejects_unknown_keys(self) -> None:
        with pytest.raises(PydanticValidationError):
            RoleShortcut.model_validate({"name": "a", "command": "b", "alias": "c"})

    def test_health_checks_from_config(self) -> None:
        role = RoleDefinition(config={"healthChecks": ["http://a/health"]})

        assert role.health_checks == ["http://a/health"]


class TestWorkspaceConfig:
    def test_accepts_camel_case_and_field_names(self) -> None:
        from_disk = WorkspaceConfig.model_validate(
            {"healthChecks": ["http://a"], "updatedAt": "T"}
        )
        from_code = WorkspaceConfig(health_checks=["http://a"], updated_at="T")

        assert from_disk == from_code

    def test_json_dict_omits_unset_fields(self) -> None:
        config = WorkspaceConfig(
            role="devops", history=[HistoryEntry(role="devops", applied_at="T")]
        )

        assert config.to_json_dict() == {
            "role": "devops",
            "history": [{"role": "devops", "appliedAt": "T"}],
        }


class TestResultsAndErrors:
    def test_health_result_dict_includes_status_when_present(self) -> None:
        assert HealthCheckResult("http://a", True, 200).to_dict() == {
            "url": "http://a",
            "healthy": True,
            "status": 200,
        }

    def test_validation_error_message_without_context(self) -> None:
        assert str(ValidationError("APPNEURAL snippet missing")) == (
            "APPNEURAL snippet missing"
        )

    def test_validation_error_message_with_context(self) -> None:
        error = ValidationError("APPNEURAL snippet missing", {"snippetKey": "db"})

        assert str(error) == "APPNEURAL snippet missing (snippetKey='db')"
        assert error.context == {"snippetKey": "db"}
