"""Core domain package for lint-my-commit.

Core contains segmentation, rule compilation, and validation logic without any
file, console, or process-specific code, keeping the business logic portable.
"""
