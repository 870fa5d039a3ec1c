"""Command line modules."""
