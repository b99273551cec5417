"""Bundled JSON-LD resources."""
