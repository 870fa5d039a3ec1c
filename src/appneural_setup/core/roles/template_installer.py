"""Copies role templates and snippets into the global configuration directory.

Every source is checked before anything is written. Copies go to a staging
directory next to their destination and are moved into place only once all
of them succeeded, so a failed install leaves the global directory as it was.
"""

import logging
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from appneural_setup.core.config.config_manager import ConfigurationManager
from appneural_setup.exceptions import ValidationError

logger = logging.getLogger(__name__)

_ROLE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def validate_role_name(role: str) -> None:
    """Ensure a role name is usable as a single path segment.

    Raises:
        ValidationError: If the name is empty or contains path characters
    """
    if not _ROLE_NAME_PATTERN.match(role):
        raise ValidationError(
            "APPNEURAL role name is not filesystem-safe", {"role": role}
        )


def validate_relative_key(key: str, kind: str) -> PurePosixPath:
    """Ensure a template or snippet key stays inside its root.

    Args:
        key: Slash-separated key such as ``nest-service/basic``
        kind: ``templateKey`` or ``snippetKey``, used in the error context

    Returns:
        The key as a relative path

    Raises:
        ValidationError: If the key is empty, absolute or walks upwards
    """
    path = PurePosixPath(key)
    if (
        not key.strip()
        or "\\" in key
        or path.is_absolute()
        or any(part in ("..", ".") for part in path.parts)
    ):
        raise ValidationError(
            f"APPNEURAL {kind} is not a safe relative path", {kind: key}
        )
    return path


@dataclass(frozen=True)
class _PlannedCopy:
    source: Path
    destination: Path
    is_directory: bool


class TemplateInstaller:
    """Installs the templates and snippets a role references."""

    def __init__(self, config_manager: ConfigurationManager):
        self._config_manager = config_manager

    def plan(
        self, role: str, templates: list[str], snippets: list[str]
    ) -> list[_PlannedCopy]:
        """Resolve sources and destinations, failing on the first missing one.

        Raises:
            ValidationError: If a name is unsafe or a source does not exist
        """
        validate_role_name(role)
        template_root = self._config_manager.internal_template_root
        snippet_root = self._config_manager.internal_snippet_root
        role_root = self._config_manager.global_templates_dir / "roles" / role

        planned: list[_PlannedCopy] = []
        for template_key in templates:
            key_path = validate_relative_key(template_key, "templateKey")
            source = template_root.joinpath(*key_path.parts)
            if not source.is_dir():
                raise ValidationError(
                    "APPNEURAL role template missing", {"templateKey": template_key}
                )
            planned.append(
                _PlannedCopy(source, role_root.joinpath(*key_path.parts), True)
            )

        for snippet_key in snippets:
            key_path = validate_relative_key(snippet_key, "snippetKey")
            relative = key_path.parent.joinpath(f"{key_path.name}.md")
            source = snippet_root.joinpath(*relative.parts)
            if not source.is_file():
                raise ValidationError(
                    "APPNEURAL snippet missing", {"snippetKey": snippet_key}
                )
            destination = self._config_manager.global_snippets_dir.joinpath(
                *relative.parts
            )
            planned.append(_PlannedCopy(source, destination, False))

        return planned

    def install(self, role: str, templates: list[str], snippets: list[str]) -> None:
        """Copy a role's templates and snippets into the global directory."""
        planned = self.plan(role, templates, snippets)

        global_dir = self._config_manager.global_config_dir
        self._config_manager.global_templates_dir.mkdir(parents=True, exist_ok=True)
        self._config_manager.global_snippets_dir.mkdir(parents=True, exist_ok=True)
        if not planned:
            return

        staging_root = Path(tempfile.mkdtemp(prefix=".staging-", dir=global_dir))
        try:
            staged: list[tuple[Path, _PlannedCopy]] = []
            for index, copy in enumerate(planned):
                staged_path = staging_root / str(index)
                if copy.is_directory:
                    shutil.copytree(copy.source, staged_path)
                else:
                    shutil.copy2(copy.source, staged_path)
                staged.append((staged_path, copy))

            for staged_path, copy in staged:
                if copy.is_directory and copy.destination.exists():
                    shutil.rmtree(copy.destination)
                copy.destination.parent.mkdir(parents=True, exist_ok=True)
                shutil.move(str(staged_path), str(copy.destination))
                logger.debug("Installed %s -> %s", copy.source, copy.destination)
        finally:
            shutil.rmtree(staging_root, ignore_errors=True)
