"""Bundled JSON schema contracts."""
