"""CLI command implementation for stub syntax checking."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from extension_stubgen.cli.errors import cli_error_handler
from extension_stubgen.cli.formatting import OutputFormatter
from extension_stubgen.logging import setup_logging
from extension_stubgen.syntax import StubSyntaxChecker

logger = logging.getLogger(__name__)


def check_syntax_command(stub_path: Path, log_level: str = "INFO") -> None:
    """CLI command implementation for checking a stub file's syntax.

    Exits with code 1 when the file has syntax issues.

    Args:
        stub_path: Path to the PHP stub
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("check-syntax", "Syntax check failed"):
        source = stub_path.read_text(encoding="utf-8")
        issues = StubSyntaxChecker().find_issues(source)
        OutputFormatter().format_syntax_issues(str(stub_path), issues)

        if issues:
            logger.warning("%s has %d syntax issue(s)", stub_path, len(issues))
            raise typer.Exit(1)
