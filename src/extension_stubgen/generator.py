"""Stub assembly: traversal of module metadata and namespace partitioning."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from extension_stubgen.errors import OracleError
from extension_stubgen.generator_config import StubGeneratorConfig
from extension_stubgen.metadata.models import ModuleMetadata
from extension_stubgen.rendering.constructs import ConstructRenderer, Fragment
from extension_stubgen.rendering.diagnostics import Diagnostic

if TYPE_CHECKING:
    from extension_stubgen.oracle.protocol import MetadataOracle

logger = logging.getLogger(__name__)

_FRAGMENT_SEPARATOR = "\n\n"


class NamespacePartitioner:
    """Accumulates rendered fragments keyed by namespace.

    Namespaces keep the order in which they were first seen and fragments
    keep insertion order. Nothing is sorted or deduplicated.
    """

    def __init__(self) -> None:
        """Initialise empty namespace and global accumulators."""
        self.namespaces: dict[str, list[str]] = {}
        self.global_fragments: list[str] = []

    def add(self, fragment: Fragment) -> None:
        """Append a fragment to its namespace, or to the global scope."""
        if fragment.namespace is None:
            self.global_fragments.append(fragment.text)
        else:
            self.namespaces.setdefault(fragment.namespace, []).append(fragment.text)

    def __len__(self) -> int:
        """Return the total number of fragments."""
        return len(self.global_fragments) + sum(
            len(fragments) for fragments in self.namespaces.values()
        )


class StubGenerator:
    """Builds a PHP stub file from the metadata of one extension.

    All rendering happens at construction: constants, then functions, then
    classes, each in the order the metadata lists them. ``generate`` only
    serialises the accumulated fragments.
    """

    def __init__(
        self,
        module: ModuleMetadata,
        config: StubGeneratorConfig | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> None:
        """Render every construct of the module.

        Args:
            module: Metadata of the extension
            config: Layout configuration, defaults to StubGeneratorConfig()
            diagnostics: Diagnostics raised before rendering (e.g. by the oracle)

        """
        self.module = module
        self.config = config or StubGeneratorConfig()
        self.diagnostics: list[Diagnostic] = list(diagnostics or [])
        self.partitioner = NamespacePartitioner()

        renderer = ConstructRenderer(self.config, self.diagnostics)

        for constant in module.constants:
            self._apply(constant.name, renderer.render_constant, constant)

        for function in module.functions:
            self._apply(function.name, renderer.render_function, function)

        for cls in module.classes:
            self._apply(cls.name, renderer.render_class, cls)

        logger.debug(
            "Rendered %d fragments for extension '%s'",
            len(self.partitioner),
            module.name,
        )

    @classmethod
    def for_extension(
        cls,
        extension: str,
        oracle: MetadataOracle,
        config: StubGeneratorConfig | None = None,
    ) -> StubGenerator:
        """Reflect an extension through an oracle and render it.

        An extension the oracle cannot reflect is not fatal: the failure is
        logged and recorded as a diagnostic, and the generator is built from
        an empty module so ``generate`` still returns a well-formed stub.

        Args:
            extension: Name of the extension to reflect
            oracle: Source of the extension metadata
            config: Layout configuration

        Returns:
            A populated StubGenerator

        """
        try:
            module = oracle.reflect(extension)
        except OracleError as e:
            logger.error("Cannot reflect extension '%s': %s", extension, e)
            return cls(
                ModuleMetadata.empty(extension),
                config,
                diagnostics=[Diagnostic("error", extension, str(e))],
            )
        return cls(module, config)

    def generate(self) -> str:
        """Create the stub file contents.

        Returns:
            The PHP source of the stub: namespace blocks in first-seen order,
            followed by the global-scope fragments

        """
        header = f"<?php\n/**\n * {self.config.file_notice}\n */\n\n"

        blocks = [
            f"namespace {namespace} {{\n"
            + _FRAGMENT_SEPARATOR.join(fragments)
            + "\n}"
            for namespace, fragments in self.partitioner.namespaces.items()
        ]

        if self.partitioner.global_fragments:
            global_code = _FRAGMENT_SEPARATOR.join(self.partitioner.global_fragments)
            # Bracketed namespaces forbid code outside a namespace block
            if blocks:
                global_code = "namespace {\n" + global_code + "\n}"
            blocks.append(global_code)

        if not blocks:
            return header
        return header + _FRAGMENT_SEPARATOR.join(blocks) + "\n"

    @property
    def has_errors(self) -> bool:
        """True if any construct was skipped or the oracle failed."""
        return any(d.severity == "error" for d in self.diagnostics)

    def _apply(
        self,
        construct: str,
        render: Callable[[Any], Fragment],
        metadata: Any,
    ) -> None:
        first_new = len(self.diagnostics)
        try:
            fragment = render(metadata)
        except Exception as e:
            logger.error("Skipping %s: %s", construct, e)
            # Warnings about members of a skipped construct no longer apply
            del self.diagnostics[first_new:]
            self.diagnostics.append(Diagnostic("error", construct, str(e)))
            return
        self.partitioner.add(fragment)
