"""CLI command implementations for stub generation and symbol listing."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from extension_stubgen.cli.errors import CLIError, cli_error_handler
from extension_stubgen.cli.formatting import OutputFormatter
from extension_stubgen.generator import StubGenerator
from extension_stubgen.generator_config import StubGeneratorConfig
from extension_stubgen.logging import setup_logging
from extension_stubgen.oracle import (
    DumpFileOracle,
    MetadataOracle,
    PhpReflectionOracle,
)
from extension_stubgen.syntax import StubSyntaxChecker

logger = logging.getLogger(__name__)
console = Console(stderr=True)


def _load_config(config_path: Path | None, php_binary: str | None) -> StubGeneratorConfig:
    config = (
        StubGeneratorConfig.from_yaml(config_path)
        if config_path
        else StubGeneratorConfig()
    )
    if php_binary:
        config = config.model_copy(update={"php_binary": php_binary})
    return config


def _build_oracle(dump: Path | None, config: StubGeneratorConfig) -> MetadataOracle:
    if dump is not None:
        logger.info("Reading extension metadata from %s", dump)
        return DumpFileOracle(dump)
    logger.info("Reflecting extension metadata with %s", config.php_binary)
    return PhpReflectionOracle(config.php_binary)


def generate_stub_command(  # noqa: PLR0913 - mirrors the CLI options
    extension: str,
    dump: Path | None = None,
    output: Path | None = None,
    config_path: Path | None = None,
    php_binary: str | None = None,
    check_syntax: bool = False,
    strict: bool = False,
    verbose: bool = False,
    log_level: str = "INFO",
) -> None:
    """CLI command implementation for generating an extension stub.

    Args:
        extension: Name of the extension to stub
        dump: Metadata dump to read instead of reflecting a live PHP
        output: File to write the stub to, stdout if None
        config_path: YAML generator configuration
        php_binary: PHP CLI overriding the configured one
        check_syntax: Parse the stub and fail on syntax errors
        strict: Fail if any construct was skipped or the extension was not found
        verbose: Enable debug logging
        log_level: Logging level

    """
    setup_logging(level="DEBUG" if verbose else log_level)

    with cli_error_handler("generate", "Stub generation failed"):
        config = _load_config(config_path, php_binary)
        oracle = _build_oracle(dump, config)

        generator = StubGenerator.for_extension(extension, oracle, config)
        stub = generator.generate()

        if check_syntax:
            StubSyntaxChecker().ensure_valid(stub)
            logger.info("Stub for '%s' passed syntax checking", extension)

        if output is None:
            typer.echo(stub, nl=False)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(stub, encoding="utf-8")
            console.print(f"[green]✅ Stub written to {output}[/green]")
            logger.info("Stub saved to %s", output)

        OutputFormatter().format_diagnostics(generator.diagnostics)

        if strict and generator.has_errors:
            raise CLIError(
                "Stub is incomplete, see diagnostics above",
                command="generate",
            )


def list_symbols_command(
    extension: str,
    dump: Path | None = None,
    php_binary: str | None = None,
    log_level: str = "INFO",
) -> None:
    """CLI command implementation for listing an extension's symbols.

    Args:
        extension: Name of the extension
        dump: Metadata dump to read instead of reflecting a live PHP
        php_binary: PHP CLI overriding the default
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("ls-symbols", "Symbol listing failed"):
        config = _load_config(None, php_binary)
        module = _build_oracle(dump, config).reflect(extension)
        OutputFormatter().format_symbol_tree(module)
