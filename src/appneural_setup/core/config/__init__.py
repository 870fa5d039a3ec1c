"""Configuration resolution, manifests and persisted workspace state."""
