"""Local development environment provisioning."""
