"""Error classes for the extension stub generator.

This module provides:
- StubGenError: Base exception class for all stub generator errors
- OracleError, ExtensionNotFoundError, MetadataLoadError: Metadata oracle exceptions
- RenderError: Raised when metadata violates the oracle contract
- StubSyntaxError: Raised when a generated stub does not parse
- ConfigError: Raised when generator configuration is invalid
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extension_stubgen.syntax import SyntaxIssue


class StubGenError(Exception):
    """Base exception for all stub generator errors."""

    pass


class OracleError(StubGenError):
    """Base exception for metadata oracle errors."""

    pass


class ExtensionNotFoundError(OracleError):
    """Raised when the requested extension cannot be reflected."""

    pass


class MetadataLoadError(OracleError):
    """Raised when metadata cannot be read or does not validate."""

    pass


class RenderError(StubGenError):
    """Raised when a construct cannot be rendered from its metadata."""

    pass


class StubSyntaxError(StubGenError):
    """Raised when a stub fails syntax checking."""

    def __init__(self, message: str, issues: Sequence[SyntaxIssue] = ()) -> None:
        """Initialise with the issues that failed the check."""
        super().__init__(message)
        self.issues = list(issues)


class ConfigError(StubGenError):
    """Raised when generator configuration is invalid."""

    pass
