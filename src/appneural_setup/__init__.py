"""APPNEURAL setup - role profiles and local environment bootstrapping."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("appneural-setup")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
