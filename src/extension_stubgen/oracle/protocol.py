"""Protocol for extension metadata oracles."""

from typing import Protocol, runtime_checkable

from extension_stubgen.metadata.models import ModuleMetadata


@runtime_checkable
class MetadataOracle(Protocol):
    """Read-only source of reflected extension metadata.

    Each oracle implementation must provide a ``reflect`` method that
    returns the full metadata of one extension: its constants, free
    functions and classes, in the order the extension enumerates them.
    """

    def reflect(self, extension: str) -> ModuleMetadata:
        """Return the metadata of an extension.

        Args:
            extension: Extension name (e.g. 'json', 'redis')

        Returns:
            ModuleMetadata of the extension

        Raises:
            ExtensionNotFoundError: If the extension is not available
            MetadataLoadError: If the metadata cannot be read

        """
        ...
