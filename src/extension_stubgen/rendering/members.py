"""Rendering of parameters, properties and methods."""

import logging

from extension_stubgen.errors import RenderError
from extension_stubgen.generator_config import StubGeneratorConfig
from extension_stubgen.metadata.models import (
    LiteralValue,
    MethodMetadata,
    ParameterMetadata,
    PropertyMetadata,
    ValueReference,
)
from extension_stubgen.rendering.diagnostics import Diagnostic
from extension_stubgen.rendering.literals import export_literal
from extension_stubgen.rendering.types import render_type

logger = logging.getLogger(__name__)

EMPTY_BODY = " {}"


class MemberRenderer:
    """Renders the member-level constructs of a stub.

    Parameters of free functions and of methods go through the same
    ``render_parameter`` so both produce identical text.
    """

    def __init__(
        self,
        config: StubGeneratorConfig,
        diagnostics: list[Diagnostic] | None = None,
    ) -> None:
        """Initialise the renderer.

        Args:
            config: Layout configuration (indent, placeholder literal)
            diagnostics: Sink for non-fatal problems, shared with the caller

        """
        self._config = config
        self.diagnostics: list[Diagnostic] = (
            diagnostics if diagnostics is not None else []
        )

    def render_value(self, value: ValueReference | None, construct: str) -> str:
        """Render a default or constant value, never raising.

        Unresolved values, and literals with no PHP form (e.g. a date read
        from a YAML dump), become the placeholder and a warning.

        Args:
            value: The value, None when it is not known at all
            construct: Name reported in the warning

        Returns:
            The PHP literal, or the configured placeholder

        """
        if isinstance(value, LiteralValue):
            try:
                return export_literal(value.value)
            except RenderError as e:
                self._warn(construct, f"{e}, using placeholder")
                return self._config.unresolved_placeholder

        self._warn(construct, "value could not be resolved, using placeholder")
        return self._config.unresolved_placeholder

    def render_parameter(self, param: ParameterMetadata, owner: str = "") -> str:
        """Render one parameter for a comma-joined parameter list.

        Args:
            param: Parameter metadata
            owner: Name of the function or method, used in diagnostics

        """
        res = ""
        if param.type is not None:
            res += render_type(param.type) + " "
        if param.by_reference:
            res += "&"
        if param.variadic:
            res += "..."
        res += "$" + param.name
        # Variadic parameters are optional but cannot declare a default
        if param.optional and not param.variadic:
            res += "=" + self.render_value(param.default, f"{owner}(${param.name})")
        return res

    def render_parameters(self, params: list[ParameterMetadata], owner: str) -> str:
        """Render a parameter list; placeholders are reported against ``owner``.

        Args:
            params: Parameters in declaration order
            owner: Name of the function or method, used in diagnostics

        Returns:
            The parameters joined with ``", "``

        """
        return ", ".join(self.render_parameter(p, owner) for p in params)

    def render_property(self, prop: PropertyMetadata) -> str:
        """Render a property declaration line (with optional doc comment)."""
        indent = self._config.indent
        res = indent
        if prop.doc_comment:
            res += prop.doc_comment + "\n" + indent
        res += self._property_modifiers(prop)
        if prop.type is not None:
            res += render_type(prop.type) + " "
        res += "$" + prop.name + ";\n"
        return res

    def render_method(
        self, method: MethodMetadata, owner: str, in_interface: bool = False
    ) -> str:
        """Render a method declaration.

        Abstract methods (and every interface method) end with ``;``; all
        other methods get an empty body.

        Args:
            method: Method metadata
            owner: Short name of the enclosing class, used in diagnostics
            in_interface: Whether the enclosing construct is an interface

        Returns:
            The method declaration, newline terminated

        """
        indent = self._config.indent
        res = indent
        if method.doc_comment:
            res += method.doc_comment + "\n" + indent
        params = self.render_parameters(method.parameters, f"{owner}::{method.name}")
        res += (
            self._method_modifiers(method, in_interface)
            + "function "
            + method.name
            + " ("
            + params
            + ")"
        )
        if method.return_type is not None:
            res += ": " + render_type(method.return_type)
        if method.is_abstract or in_interface:
            res += ";\n"
        else:
            res += EMPTY_BODY + "\n"
        return res

    def _property_modifiers(self, prop: PropertyMetadata) -> str:
        res = prop.visibility + " "
        if prop.is_static:
            res += "static "
        return res

    def _method_modifiers(self, method: MethodMetadata, in_interface: bool) -> str:
        res = method.visibility + " "
        # Interface methods are implicitly abstract; the keyword is illegal there
        if method.is_abstract and not in_interface:
            res += "abstract "
        if method.is_static:
            res += "static "
        if method.is_final:
            res += "final "
        return res

    def _warn(self, construct: str, message: str) -> None:
        logger.warning("%s: %s", construct, message)
        self.diagnostics.append(Diagnostic("warning", construct, message))
