"""Result records returned by the setup flows. Never persisted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from appneural_setup.schemas.role_manifest import RoleShortcut

PackageManager = Literal["pnpm", "yarn", "npm"]
ComposeCommand = Literal["docker", "docker-compose"]


@dataclass
class RoleSetupResult:
    """What a role application registered."""

    role: str
    shortcuts: list[RoleShortcut] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)
    snippets: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)


@dataclass
class HealthCheckResult:
    """Outcome of probing one endpoint.

    ``status`` stays None when no HTTP response was received.
    """

    url: str
    healthy: bool
    status: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict, omitting status when no response arrived."""
        result: dict[str, Any] = {"url": self.url, "healthy": self.healthy}
        if self.status is not None:
            result["status"] = self.status
        return result


@dataclass
class LocalSetupResult:
    """Summary of a local environment provisioning run."""

    package_manager: PackageManager
    env_generated: bool
    docker_services: list[str]
    migrations_executed: bool
    seeders_executed: bool
    health_checks: list[HealthCheckResult] = field(default_factory=list)
