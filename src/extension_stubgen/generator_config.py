"""Configuration for StubGenerator."""

import os
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from extension_stubgen.errors import ConfigError

_DEFAULT_NOTICE = "Generated stub file for code completion purposes"


def _default_php_binary() -> str:
    return os.getenv("STUBGEN_PHP_BINARY", "php")


class StubGeneratorConfig(BaseModel):
    """Configuration for StubGenerator with Pydantic validation.

    Controls the textual layout of the generated stub and how the live
    reflection oracle invokes PHP.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: str = Field(
        default="    ",
        description="Indentation used for class members",
    )
    unresolved_placeholder: str = Field(
        default="'<?>'",
        description="Literal emitted for defaults that cannot be resolved",
        min_length=1,
    )
    file_notice: str = Field(
        default=_DEFAULT_NOTICE,
        description="Text of the generated-file notice comment",
    )
    php_binary: str = Field(
        default_factory=_default_php_binary,
        description="PHP CLI used by the live reflection oracle",
        min_length=1,
    )

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        """Only allow whitespace indentation."""
        if v and not v.isspace():
            raise ValueError("indent must contain only whitespace")
        return v

    @field_validator("file_notice")
    @classmethod
    def validate_notice(cls, v: str) -> str:
        """Reject text that would close the notice comment early."""
        if "*/" in v:
            raise ValueError("file_notice must not contain '*/'")
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties mapping.

        Args:
            properties: Raw properties containing any of:
                - indent (str, optional): Member indentation.
                - unresolved_placeholder (str, optional): Placeholder literal.
                - file_notice (str, optional): Notice comment text.
                - php_binary (str, optional): PHP CLI path.

        Returns:
            Validated configuration object

        Raises:
            ConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ConfigError(f"Invalid stub generator configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: Path) -> Self:
        """Load configuration from a YAML file.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated

        """
        try:
            with open(config_path, encoding="utf-8") as f:
                properties = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML config {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

        if not isinstance(properties, dict):
            raise ConfigError(f"Invalid configuration format in {config_path}")
        return cls.from_properties(properties)  # type: ignore[arg-type]
