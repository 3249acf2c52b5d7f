"""Data models for reflected extension metadata.

These models are the read-only input of the stub generator. They can be
built directly, or loaded from a JSON/YAML metadata dump with
``ModuleMetadata.model_validate``.
"""

from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAMESPACE_SEPARATOR = "\\"

# Type names PHP resolves without a namespace lookup
BUILTIN_TYPE_NAMES = frozenset(
    {
        "array",
        "bool",
        "callable",
        "false",
        "float",
        "int",
        "iterable",
        "mixed",
        "never",
        "null",
        "object",
        "parent",
        "self",
        "static",
        "string",
        "true",
        "void",
    }
)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class BuiltinType(_FrozenModel):
    """A primitive or built-in type (``int``, ``array``, ``self``...)."""

    kind: Literal["builtin"] = "builtin"
    name: str
    nullable: bool = False


class NamedType(_FrozenModel):
    """A user-defined class or interface type, fully qualified."""

    kind: Literal["named"] = "named"
    name: str
    nullable: bool = False

    @field_validator("name")
    @classmethod
    def strip_leading_separator(cls, v: str) -> str:
        """Store qualified names without the root namespace marker."""
        return v.lstrip(NAMESPACE_SEPARATOR)


class IntersectionType(_FrozenModel):
    """An intersection of class types (``A&B``)."""

    kind: Literal["intersection"] = "intersection"
    types: list[NamedType]


class UnionType(_FrozenModel):
    """A union of two or more types (``int|string|null``).

    Members may be intersections, as in ``(A&B)|null``.
    """

    kind: Literal["union"] = "union"
    types: list[
        Annotated[
            BuiltinType | NamedType | IntersectionType, Field(discriminator="kind")
        ]
    ]


TypeReference = Annotated[
    BuiltinType | NamedType | IntersectionType | UnionType,
    Field(discriminator="kind"),
]


class LiteralValue(_FrozenModel):
    """A concrete value (scalar, null, list or mapping)."""

    kind: Literal["literal"] = "literal"
    value: Any = None


class UnresolvedValue(_FrozenModel):
    """A value the oracle could not evaluate statically."""

    kind: Literal["unresolved"] = "unresolved"
    expression: str | None = None


ValueReference = Annotated[
    LiteralValue | UnresolvedValue, Field(discriminator="kind")
]


def _wrap_value(v: Any) -> Any:
    """Wrap a bare dump value into a LiteralValue payload."""
    if isinstance(v, (LiteralValue, UnresolvedValue)):
        return v
    if isinstance(v, dict) and v.get("kind") in ("literal", "unresolved"):
        return v
    return {"kind": "literal", "value": v}


def _constant_list(v: Any) -> Any:
    if isinstance(v, dict):
        return [{"name": name, "value": value} for name, value in v.items()]
    return v


def _coerce_type(v: Any) -> Any:
    if isinstance(v, str):
        return parse_type(v)
    return v


def parse_type(
    text: str,
) -> BuiltinType | NamedType | IntersectionType | UnionType:
    """Build a type reference from its textual form.

    Args:
        text: Type as written in source, e.g. ``int``, ``?Foo\\Bar``,
            ``int|string|null`` or ``(A&B)|null``

    Returns:
        The corresponding tagged type reference

    """
    text = text.strip()
    nullable = text.startswith("?")
    if nullable:
        text = text[1:]

    members = [part.strip() for part in text.split("|")]
    if len(members) > 1:
        return UnionType(types=[_parse_union_member(m) for m in members])
    if "&" in members[0]:
        return _parse_intersection(members[0])
    return _parse_single_type(members[0], nullable)


def _parse_union_member(text: str) -> BuiltinType | NamedType | IntersectionType:
    if "&" in text:
        return _parse_intersection(text)
    return _parse_single_type(text, False)


def _parse_intersection(text: str) -> IntersectionType:
    parts = text.strip().strip("()").split("&")
    return IntersectionType(types=[NamedType(name=p.strip()) for p in parts])


def _parse_single_type(name: str, nullable: bool) -> BuiltinType | NamedType:
    if name.lower() in BUILTIN_TYPE_NAMES:
        return BuiltinType(name=name.lower(), nullable=nullable)
    return NamedType(name=name, nullable=nullable)


def split_qualified_name(name: str) -> tuple[str | None, str]:
    """Split a possibly namespaced name into (namespace, short name).

    Args:
        name: Name such as ``A\\B\\C`` or ``DEBUG``

    Returns:
        Tuple of the namespace (``None`` for global names) and the short name

    """
    parts = name.lstrip(NAMESPACE_SEPARATOR).split(NAMESPACE_SEPARATOR)
    short_name = parts.pop()
    namespace = NAMESPACE_SEPARATOR.join(parts) if parts else None
    return namespace, short_name


class ConstantMetadata(_FrozenModel):
    """A constant as (name, value); name may be namespaced."""

    name: str
    value: ValueReference

    @field_validator("value", mode="before")
    @classmethod
    def wrap_bare_value(cls, v: Any) -> Any:
        """Accept bare dump values in place of a LiteralValue."""
        return _wrap_value(v)


class ParameterMetadata(_FrozenModel):
    """A parameter of a function or method."""

    name: str
    type: TypeReference | None = None
    by_reference: bool = False
    variadic: bool = False
    optional: bool = False
    default: ValueReference | None = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type_string(cls, v: Any) -> Any:
        """Accept type strings such as ``?int`` in dumps."""
        return _coerce_type(v)

    @field_validator("default", mode="before")
    @classmethod
    def wrap_bare_default(cls, v: Any) -> Any:
        """Accept bare dump values in place of a LiteralValue.

        A literal ``null`` default must be written as
        ``{"kind": "literal", "value": null}`` since a bare ``null`` means
        the default is not known.
        """
        if v is None:
            return None
        return _wrap_value(v)

    @property
    def has_unknown_default(self) -> bool:
        """True when the parameter is optional but its default is not known."""
        return (
            self.optional
            and not self.variadic
            and not isinstance(self.default, LiteralValue)
        )


class FunctionMetadata(_FrozenModel):
    """A free function; name may be namespaced."""

    name: str
    doc_comment: str | None = None
    parameters: list[ParameterMetadata] = []
    return_type: TypeReference | None = None

    @field_validator("return_type", mode="before")
    @classmethod
    def parse_return_type_string(cls, v: Any) -> Any:
        """Accept type strings such as ``?int`` in dumps."""
        return _coerce_type(v)


Visibility = Literal["public", "protected", "private"]


class MethodMetadata(FunctionMetadata):
    """A method of a class, interface or trait."""

    visibility: Visibility = "public"
    is_static: bool = False
    is_abstract: bool = False
    is_final: bool = False
    declaring_class: str | None = None  # None: declared by the listing class


class PropertyMetadata(_FrozenModel):
    """A property of a class or trait."""

    name: str
    doc_comment: str | None = None
    visibility: Visibility = "public"
    is_static: bool = False
    type: TypeReference | None = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type_string(cls, v: Any) -> Any:
        """Accept type strings such as ``?int`` in dumps."""
        return _coerce_type(v)


class ClassMetadata(_FrozenModel):
    """A class, interface or trait with its members."""

    name: str
    kind: Literal["class", "interface", "trait"] = "class"
    is_abstract: bool = False
    is_final: bool = False
    doc_comment: str | None = None
    parent: str | None = None
    interfaces: list[str] = []
    traits: list[str] = []
    constants: list[ConstantMetadata] = []
    properties: list[PropertyMetadata] = []
    methods: list[MethodMetadata] = []

    @field_validator("constants", mode="before")
    @classmethod
    def accept_constant_mapping(cls, v: Any) -> Any:
        """Accept ``{name: value}`` mappings as well as lists of constants."""
        return _constant_list(v)

    def declares(self, method: MethodMetadata) -> bool:
        """Check whether this class declares the method (not inherits it).

        PHP class names are case-insensitive, so the comparison is too.
        """
        if method.declaring_class is None:
            return True
        own = self.name.lstrip(NAMESPACE_SEPARATOR).lower()
        return method.declaring_class.lstrip(NAMESPACE_SEPARATOR).lower() == own


class ModuleMetadata(_FrozenModel):
    """A reflected extension: its constants, functions and classes."""

    name: str = ""
    version: str | None = None
    constants: list[ConstantMetadata] = []
    functions: list[FunctionMetadata] = []
    classes: list[ClassMetadata] = []

    @field_validator("constants", mode="before")
    @classmethod
    def accept_constant_mapping(cls, v: Any) -> Any:
        """Accept ``{name: value}`` mappings as well as lists of constants."""
        return _constant_list(v)

    @classmethod
    def empty(cls, name: str = "") -> Self:
        """Return a module with nothing to enumerate."""
        return cls(name=name)
