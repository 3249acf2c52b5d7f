"""CLI command implementations for extension-stubgen."""

from extension_stubgen.cli.check import check_syntax_command
from extension_stubgen.cli.errors import CLIError
from extension_stubgen.cli.generate import (
    generate_stub_command,
    list_symbols_command,
)

__all__ = [
    "CLIError",
    "check_syntax_command",
    "generate_stub_command",
    "list_symbols_command",
]
