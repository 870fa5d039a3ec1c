"""Common CLI utility functions."""

from collections.abc import Callable
from typing import TypeVar

import click
from rich.console import Console

T = TypeVar("T")


def echo_success(message: str) -> None:
    """Echo a success message with consistent formatting.

    Args:
        message: Success message to display
    """
    click.echo(f"✅ {message}")


def echo_error(message: str) -> None:
    """Echo an error message with consistent formatting.

    Args:
        message: Error message to display
    """
    click.echo(f"❌ {message}", err=True)


def echo_info(message: str) -> None:
    click.echo(f"ℹ️  {message}")


def echo_warning(message: str) -> None:
    click.echo(f"⚠️  {message}")


def with_spinner(
    message: str, operation: Callable[[], T], spinner: str = "dots"
) -> T:
    """Run an operation while a Rich status spinner is shown on stderr.

    Args:
        message: Text shown next to the spinner
        operation: Zero-argument callable to run
        spinner: Rich spinner name

    Returns:
        Whatever ``operation`` returns
    """
    console = Console(stderr=True)
    with console.status(message, spinner=spinner):
        return operation()
