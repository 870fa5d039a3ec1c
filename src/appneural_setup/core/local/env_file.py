"""Generation of ``.env`` from ``.env.example``."""

import os
import secrets
from pathlib import Path

ENV_EXAMPLE_FILE = ".env.example"
ENV_FILE = ".env"
GENERATED_SECRETS: tuple[str, ...] = ("JWT_SECRET", "ENCRYPTION_KEY")


def parse_env(content: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines.

    Blank lines and lines starting with ``#`` are skipped. Each line is split
    on its first ``=``; a line without one maps to an empty value.
    """
    result: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        result[key] = value
    return result


def serialize_env(env: dict[str, str]) -> str:
    return os.linesep.join(f"{key}={value}" for key, value in env.items())


def create_secret(length: int = 32) -> str:
    """Random secret of ``length`` bytes, hex encoded (``2 * length`` chars)."""
    return secrets.token_hex(length)


def generate_env_file(workspace_root: Path) -> bool:
    """Write ``.env`` from ``.env.example`` with fresh secrets.

    Returns:
        True if ``.env`` was written, False if there is no example file
    """
    example_path = workspace_root / ENV_EXAMPLE_FILE
    if not example_path.exists():
        return False

    env = parse_env(example_path.read_text(encoding="utf-8"))
    for name in GENERATED_SECRETS:
        env[name] = create_secret(32)

    # newline="" keeps os.linesep as written
    with open(workspace_root / ENV_FILE, "w", encoding="utf-8", newline="") as f:
        f.write(serialize_env(env))
    return True
