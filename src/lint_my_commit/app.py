"""Command-line entry point for the commit-msg hook."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from lint_my_commit import __version__
from lint_my_commit.adapters.console_reporter import ConsoleReporter
from lint_my_commit.adapters.file_source import FileInputSource
from lint_my_commit.core.config import LinterSettings, LoggingConfig
from lint_my_commit.core.errors import ConfigurationError
from lint_my_commit.core.linter import EXIT_FAILURE, CommitLinter
from lint_my_commit.settings import load_settings

PROG = "lint-my-commit"


def _configure_logging(config: LoggingConfig) -> None:
    level = getattr(logging, config.level, logging.WARNING)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        directory = os.path.dirname(os.path.abspath(config.file_path))
        os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Validate a commit message against subjectPattern, bodyPattern and "
            "footerPattern rules. Patterns are searched within each line, so "
            "anchor them with ^ and $ to match whole lines."
        ),
    )
    # Optional at the parser level so a missing path is reported like any
    # other configuration error.
    parser.add_argument("commit_msg_file", nargs="?", help="Path to the commit message file")
    parser.add_argument("rules_file", nargs="?", help="Path to the JSON rules file")
    parser.add_argument("--log-level", help="Diagnostic log level (overrides LINT_MY_COMMIT_LOG_LEVEL)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _apply_overrides(settings: LinterSettings, args: argparse.Namespace) -> LinterSettings:
    if args.log_level:
        settings = dataclasses.replace(
            settings,
            logging=dataclasses.replace(settings.logging, level=args.log_level.upper()),
        )
    if args.no_color:
        settings = dataclasses.replace(settings, color=False)
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = _apply_overrides(load_settings(), args)
    except ConfigurationError as exc:
        reporter = ConsoleReporter(color=not args.no_color)
        reporter.configuration_error(exc)
        reporter.finished(EXIT_FAILURE)
        return EXIT_FAILURE

    _configure_logging(settings.logging)
    logging.getLogger(__name__).debug("Running %s %s", PROG, __version__)

    source = FileInputSource(args.commit_msg_file, args.rules_file, encoding=settings.encoding)
    reporter = ConsoleReporter(color=settings.color)
    return asyncio.run(CommitLinter(source, reporter).run())


if __name__ == "__main__":
    raise SystemExit(main())
