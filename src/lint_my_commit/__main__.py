"""Run lint-my-commit with ``python -m lint_my_commit``."""

from lint_my_commit.app import main

raise SystemExit(main())
