"""Standalone launcher bootstrap package for configuration discovery and first-run setup."""
