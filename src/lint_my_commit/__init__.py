"""lint-my-commit: validate commit messages against per-section regex rules."""

__version__ = "1.0.0"
