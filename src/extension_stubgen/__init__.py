"""PHP extension stub generator.

This package renders reflected metadata of a native PHP extension into a
declaration-only stub file that editors and static analysers can read.

Use: oracle (dump file or live PHP) → StubGenerator → stub text
"""

from .errors import (
    ConfigError,
    ExtensionNotFoundError,
    MetadataLoadError,
    OracleError,
    RenderError,
    StubGenError,
    StubSyntaxError,
)
from .generator import NamespacePartitioner, StubGenerator
from .generator_config import StubGeneratorConfig
from .metadata import ModuleMetadata
from .oracle import DumpFileOracle, MetadataOracle, PhpReflectionOracle
from .rendering import ConstructRenderer, Diagnostic, Fragment, MemberRenderer
from .syntax import StubSyntaxChecker, SyntaxIssue

__all__ = [
    "ConfigError",
    "ConstructRenderer",
    "Diagnostic",
    "DumpFileOracle",
    "ExtensionNotFoundError",
    "Fragment",
    "MemberRenderer",
    "MetadataLoadError",
    "MetadataOracle",
    "ModuleMetadata",
    "NamespacePartitioner",
    "OracleError",
    "PhpReflectionOracle",
    "RenderError",
    "StubGenError",
    "StubGenerator",
    "StubGeneratorConfig",
    "StubSyntaxChecker",
    "StubSyntaxError",
    "SyntaxIssue",
]
