"""Rendering of top-level constructs: constants, functions and classes.

Every renderer returns a ``Fragment``: the rendered text tagged with the
namespace the construct belongs to, or ``None`` for the global scope. The
namespace is derived once, here, from the construct's own name.
"""

from dataclasses import dataclass

from extension_stubgen.generator_config import StubGeneratorConfig
from extension_stubgen.metadata.models import (
    ClassMetadata,
    ConstantMetadata,
    FunctionMetadata,
    LiteralValue,
    split_qualified_name,
)
from extension_stubgen.rendering.diagnostics import Diagnostic
from extension_stubgen.rendering.literals import export_literal
from extension_stubgen.rendering.members import EMPTY_BODY, MemberRenderer
from extension_stubgen.rendering.types import qualify, render_type


@dataclass(frozen=True)
class Fragment:
    """Rendered text of one construct and the namespace that owns it."""

    namespace: str | None
    text: str


class ConstructRenderer:
    """Renders constants, free functions and classes into fragments."""

    def __init__(
        self,
        config: StubGeneratorConfig | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> None:
        """Initialise the renderer.

        Args:
            config: Layout configuration, defaults to StubGeneratorConfig()
            diagnostics: Sink for non-fatal problems, shared with the caller

        """
        self._config = config or StubGeneratorConfig()
        self.diagnostics: list[Diagnostic] = (
            diagnostics if diagnostics is not None else []
        )
        self.members = MemberRenderer(self._config, self.diagnostics)

    def render_constant(self, constant: ConstantMetadata) -> Fragment:
        """Render ``const NAME=<literal>;`` in the constant's namespace."""
        namespace, name = split_qualified_name(constant.name)
        # An unexportable literal is a contract violation for the whole constant
        if isinstance(constant.value, LiteralValue):
            value = export_literal(constant.value.value)
        else:
            value = self.members.render_value(constant.value, constant.name)
        return Fragment(namespace, f"const {name}={value};")

    def render_function(self, function: FunctionMetadata) -> Fragment:
        """Render a free function declaration with an empty body."""
        namespace, name = split_qualified_name(function.name)
        res = ""
        if function.doc_comment:
            res += function.doc_comment + "\n"
        params = self.members.render_parameters(function.parameters, function.name)
        res += f"function {name}({params})"
        if function.return_type is not None:
            res += ": " + render_type(function.return_type)
        res += EMPTY_BODY
        return Fragment(namespace, res)

    def render_class(self, cls: ClassMetadata) -> Fragment:
        """Render a class, interface or trait with its own members.

        Methods inherited from a parent are left out: the ``extends`` and
        ``implements`` clauses carry the inherited shape.
        """
        namespace, name = split_qualified_name(cls.name)
        indent = self._config.indent
        is_interface = cls.kind == "interface"

        res = ""
        if cls.doc_comment:
            res += cls.doc_comment + "\n"
        res += self._class_modifiers(cls) + name
        res += self._class_relations(cls)
        res += " {\n"

        for trait in cls.traits:
            res += f"{indent}use {qualify(trait)};\n"

        for constant in cls.constants:
            value = self.members.render_value(
                constant.value, f"{name}::{constant.name}"
            )
            res += f"{indent}const {constant.name}={value};\n"

        for prop in cls.properties:
            res += self.members.render_property(prop)

        for method in cls.methods:
            if cls.declares(method):
                res += self.members.render_method(method, name, is_interface)

        res += "}"
        return Fragment(namespace, res)

    def _class_modifiers(self, cls: ClassMetadata) -> str:
        res = ""
        # abstract/final only apply to classes; reflection also flags
        # interfaces and traits with abstract methods as abstract
        if cls.kind == "class":
            if cls.is_abstract:
                res += "abstract "
            if cls.is_final:
                res += "final "
        if cls.kind == "trait":
            res += "trait "
        elif cls.kind == "interface":
            res += "interface "
        else:
            res += "class "
        return res

    def _class_relations(self, cls: ClassMetadata) -> str:
        res = ""
        if cls.kind == "interface":
            # Interfaces inherit other interfaces through extends
            if cls.interfaces:
                res += " extends " + ", ".join(qualify(i) for i in cls.interfaces)
            return res

        if cls.parent:
            res += " extends " + qualify(cls.parent)
        if cls.interfaces and cls.kind == "class":
            res += " implements " + ", ".join(qualify(i) for i in cls.interfaces)
        return res

