"""Adapters for kubectl and local snapshot files."""
