"""Role profile application."""
