"""Oracle backed by a pre-exported JSON or YAML metadata dump."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from extension_stubgen.errors import ExtensionNotFoundError, MetadataLoadError
from extension_stubgen.metadata.models import ModuleMetadata

logger = logging.getLogger(__name__)


class DumpFileOracle:
    """Reads extension metadata from a dump file.

    The file holds either a single module mapping, or a mapping with an
    ``extensions`` list of modules. JSON dumps are read through the YAML
    loader, YAML being a superset of JSON.
    """

    def __init__(self, dump_path: Path) -> None:
        """Initialise the oracle; the file is read lazily on first use.

        Args:
            dump_path: Path to the JSON/YAML metadata dump

        """
        self.dump_path = dump_path
        self._modules: list[ModuleMetadata] | None = None

    def reflect(self, extension: str) -> ModuleMetadata:
        """Return the metadata of an extension from the dump.

        Extension names match case-insensitively. A dump holding one unnamed
        module answers for any extension name.

        Raises:
            ExtensionNotFoundError: If the dump has no such extension
            MetadataLoadError: If the dump cannot be read or validated

        """
        modules = self.modules
        for module in modules:
            if module.name.lower() == extension.lower():
                return module

        if len(modules) == 1 and not modules[0].name:
            return modules[0].model_copy(update={"name": extension})

        raise ExtensionNotFoundError(
            f"Extension '{extension}' not found in {self.dump_path}. "
            f"Available: {self.available_extensions()}"
        )

    def available_extensions(self) -> list[str]:
        """List the names of the extensions held by the dump."""
        return [module.name for module in self.modules]

    @property
    def modules(self) -> list[ModuleMetadata]:
        """All modules of the dump, loaded on first access."""
        if self._modules is None:
            self._modules = self._load()
        return self._modules

    def _load(self) -> list[ModuleMetadata]:
        try:
            with open(self.dump_path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MetadataLoadError(
                f"Failed to parse metadata dump {self.dump_path}: {e}"
            ) from e
        except OSError as e:
            raise MetadataLoadError(
                f"Failed to read metadata dump {self.dump_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise MetadataLoadError(f"Invalid metadata dump format in {self.dump_path}")

        raw_modules: Any = data["extensions"] if "extensions" in data else [data]
        if not isinstance(raw_modules, list):
            raise MetadataLoadError(
                f"'extensions' must be a list in {self.dump_path}"
            )

        try:
            modules = [ModuleMetadata.model_validate(m) for m in raw_modules]
        except ValidationError as e:
            raise MetadataLoadError(
                f"Invalid metadata in {self.dump_path}: {e}"
            ) from e

        logger.debug("Loaded %d extension(s) from %s", len(modules), self.dump_path)
        return modules
