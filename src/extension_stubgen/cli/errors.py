"""Error reporting for extension-stubgen commands.

Failures are shown as a rich panel on stderr, titled by the command, with
a hint chosen from the kind of stub generator error. Every failure exits
with code 1.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from extension_stubgen.cli.formatting import OutputFormatter
from extension_stubgen.errors import (
    ConfigError,
    OracleError,
    RenderError,
    StubGenError,
    StubSyntaxError,
)

logger = logging.getLogger(__name__)
console = Console(stderr=True)

# First match wins, so subclasses come before their bases
_HINTS: list[tuple[type[StubGenError], str]] = [
    (ConfigError, "Check the file passed with --config."),
    (OracleError, "Pass --dump with a metadata dump, or --php with a PHP CLI."),
    (RenderError, "The metadata holds a value or type with no PHP form."),
    (StubSyntaxError, "The generated stub does not parse as PHP."),
]


class CLIError(Exception):
    """A command failure the user can act on, e.g. an incomplete stub."""

    def __init__(self, message: str, command: str) -> None:
        """Initialise the error.

        Args:
            message: What went wrong
            command: CLI command that failed (e.g. "generate")

        """
        super().__init__(message)
        self.command = command


def _hint(error: Exception) -> str | None:
    for error_type, hint in _HINTS:
        if isinstance(error, error_type):
            return hint
    return None


def _show(title: str, message: str, hint: str | None = None) -> None:
    body = f"[red]{escape(message)}[/red]"
    if hint:
        body += f"\n[dim]{hint}[/dim]"
    console.print(Panel(body, title=f"❌ {title}", border_style="red"))


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Report failures of a command and exit with code 1.

    ``typer.Exit`` passes through. Stub generator errors get a hint, and a
    syntax error also lists its issues. Anything else is unexpected and is
    logged with its traceback.

    Args:
        command: CLI command name, used in log records
        title: Panel title

    """
    try:
        yield
    except typer.Exit:
        raise
    except CLIError as e:
        logger.error("%s failed: %s", e.command, e)
        _show(title, str(e))
        raise typer.Exit(1) from e
    except StubGenError as e:
        logger.error("%s failed: %s", command, e)
        if isinstance(e, StubSyntaxError) and e.issues:
            OutputFormatter().format_syntax_issues("generated stub", e.issues)
        _show(title, str(e), _hint(e))
        raise typer.Exit(1) from e
    except Exception as e:
        logger.exception("%s failed unexpectedly", command)
        _show(title, f"Unexpected error: {e}")
        raise typer.Exit(1) from e
