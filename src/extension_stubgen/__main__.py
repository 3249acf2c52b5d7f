"""Main entry point for extension-stubgen.

This module provides the command-line interface, including commands for:
- Generating a PHP stub for an extension
- Listing the symbols of an extension
- Checking the syntax of a stub file
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from extension_stubgen.cli import (
    check_syntax_command,
    generate_stub_command,
    list_symbols_command,
)

# Load environment variables (e.g. STUBGEN_PHP_BINARY) from .env in the cwd
load_dotenv()

app = typer.Typer(name="extension-stubgen")

LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
]

DumpOption = Annotated[
    Path | None,
    typer.Option(
        "--dump",
        "-d",
        help="JSON/YAML metadata dump to read instead of reflecting a live PHP",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel="Metadata",
    ),
]

PhpOption = Annotated[
    str | None,
    typer.Option(
        "--php",
        help="PHP CLI used for live reflection (defaults to $STUBGEN_PHP_BINARY or 'php')",
        rich_help_panel="Metadata",
    ),
]


@app.command()
def generate(  # noqa: PLR0913 - CLI entry point with many options
    extension: Annotated[
        str, typer.Argument(help="Name of the extension to stub (e.g. 'redis')")
    ],
    dump: DumpOption = None,
    php: PhpOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the stub to this file instead of stdout",
            file_okay=True,
            dir_okay=False,
            writable=True,
            rich_help_panel="Output",
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML generator configuration",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    check_syntax: Annotated[
        bool,
        typer.Option(
            "--check-syntax",
            help="Parse the generated stub and fail on syntax errors",
            rich_help_panel="Output",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail when the extension is missing or a construct was skipped",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output (sets log level to DEBUG)",
        ),
    ] = False,
    log_level: LogLevelOption = "INFO",
) -> None:
    """Generate a declaration-only PHP stub for an extension.

    Example:
        extension-stubgen generate redis -o stubs/redis.php
        extension-stubgen generate myext --dump myext.json --check-syntax

    """
    generate_stub_command(
        extension,
        dump=dump,
        output=output,
        config_path=config,
        php_binary=php,
        check_syntax=check_syntax,
        strict=strict,
        verbose=verbose,
        log_level=log_level,
    )


@app.command(name="ls-symbols")
def list_symbols(
    extension: Annotated[str, typer.Argument(help="Name of the extension")],
    dump: DumpOption = None,
    php: PhpOption = None,
    log_level: LogLevelOption = "INFO",
) -> None:
    """List the constants, functions and classes of an extension."""
    list_symbols_command(extension, dump=dump, php_binary=php, log_level=log_level)


@app.command(name="check-syntax")
def check_syntax(
    stub: Annotated[
        Path,
        typer.Argument(
            help="Path to the PHP stub file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    log_level: LogLevelOption = "INFO",
) -> None:
    """Check that a stub file is syntactically valid PHP."""
    check_syntax_command(stub, log_level)


if __name__ == "__main__":
    app()
