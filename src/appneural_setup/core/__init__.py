"""Core setup services."""
