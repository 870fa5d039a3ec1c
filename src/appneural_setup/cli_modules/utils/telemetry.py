"""Logging setup and the command wrapper every CLI command runs inside."""

import logging
import subprocess
import time
from collections.abc import Callable
from typing import TypeVar

import click
import yaml
from rich.logging import RichHandler

from appneural_setup.exceptions import AppneuralError

T = TypeVar("T")

PACKAGE_LOGGER = "appneural_setup"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Attach a Rich handler to the package logger.

    Calling it again replaces the handler instead of adding another one.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(show_time=False, show_path=verbose, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _describe_command(args: object) -> str:
    if isinstance(args, (list, tuple)):
        return " ".join(str(arg) for arg in args)
    return str(args)


def with_telemetry(command_name: str, operation: Callable[[], T]) -> T:
    """Run a CLI command body, recording its duration and outcome.

    Application, YAML and subprocess failures are reported to the user as
    ``click.ClickException`` so the CLI exits with status 1 and a message
    instead of a traceback.
    """
    started = time.perf_counter()
    logger.debug("Command %s started", command_name)
    try:
        result = operation()
    except AppneuralError as e:
        _log_outcome(command_name, started, "failed")
        raise click.ClickException(str(e)) from e
    except yaml.YAMLError as e:
        _log_outcome(command_name, started, "failed")
        raise click.ClickException(f"Failed to parse roles manifest: {e}") from e
    except subprocess.CalledProcessError as e:
        _log_outcome(command_name, started, "failed")
        raise click.ClickException(
            f"Command '{_describe_command(e.cmd)}' failed with exit code "
            f"{e.returncode}"
        ) from e
    except FileNotFoundError as e:
        _log_outcome(command_name, started, "failed")
        raise click.ClickException(f"Command not found: {e.filename or e}") from e

    _log_outcome(command_name, started, "succeeded")
    return result


def _log_outcome(command_name: str, started: float, outcome: str) -> None:
    elapsed = time.perf_counter() - started
    logger.debug("Command %s %s in %.2fs", command_name, outcome, elapsed)
