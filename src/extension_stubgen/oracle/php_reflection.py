"""Oracle that reflects extensions of a live PHP interpreter."""

import json
import logging
import subprocess
from importlib.resources import as_file, files

from pydantic import ValidationError

from extension_stubgen.errors import ExtensionNotFoundError, MetadataLoadError
from extension_stubgen.metadata.models import ModuleMetadata

logger = logging.getLogger(__name__)

_DUMP_SCRIPT = "reflection_dump.php"
_EXIT_EXTENSION_NOT_LOADED = 2
_DEFAULT_TIMEOUT_SECONDS = 60.0


class PhpReflectionOracle:
    """Runs the PHP CLI with a reflection dump script and reads its JSON output."""

    def __init__(
        self, php_binary: str = "php", timeout: float = _DEFAULT_TIMEOUT_SECONDS
    ) -> None:
        """Initialise the oracle.

        Args:
            php_binary: PHP CLI executable
            timeout: Seconds to wait for the PHP process

        """
        self.php_binary = php_binary
        self.timeout = timeout

    def reflect(self, extension: str) -> ModuleMetadata:
        """Reflect an extension loaded in the PHP interpreter.

        Raises:
            ExtensionNotFoundError: If PHP cannot be run or the extension is not loaded
            MetadataLoadError: If PHP fails or prints invalid metadata

        """
        output = self._run_dump(extension)

        try:
            return ModuleMetadata.model_validate(json.loads(output))
        except json.JSONDecodeError as e:
            raise MetadataLoadError(
                f"PHP printed invalid JSON for extension '{extension}': {e}"
            ) from e
        except ValidationError as e:
            raise MetadataLoadError(
                f"Invalid metadata for extension '{extension}': {e}"
            ) from e

    def _run_dump(self, extension: str) -> str:
        script = files("extension_stubgen.oracle") / _DUMP_SCRIPT
        logger.debug("Reflecting '%s' with %s", extension, self.php_binary)

        with as_file(script) as script_path:
            try:
                result = subprocess.run(  # noqa: S603
                    [self.php_binary, str(script_path), extension],
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except FileNotFoundError as e:
                raise ExtensionNotFoundError(
                    f"PHP binary not found: {self.php_binary}"
                ) from e
            except subprocess.TimeoutExpired as e:
                raise MetadataLoadError(
                    f"PHP timed out after {self.timeout}s reflecting '{extension}'"
                ) from e
            except OSError as e:
                raise ExtensionNotFoundError(
                    f"Cannot run PHP binary {self.php_binary}: {e}"
                ) from e

        if result.returncode == _EXIT_EXTENSION_NOT_LOADED:
            raise ExtensionNotFoundError(
                f"Extension '{extension}' is not loaded: {result.stderr.strip()}"
            )
        if result.returncode != 0:
            raise MetadataLoadError(
                f"PHP exited with code {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout
