"""Adapters connecting the core linter to files and the console."""
