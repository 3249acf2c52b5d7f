"""Metadata oracles: sources of reflected extension metadata."""

from .dump_file import DumpFileOracle
from .php_reflection import PhpReflectionOracle
from .protocol import MetadataOracle

__all__ = ["DumpFileOracle", "MetadataOracle", "PhpReflectionOracle"]
