"""Type reference rendering."""

from extension_stubgen.errors import RenderError
from extension_stubgen.metadata.models import (
    NAMESPACE_SEPARATOR,
    BuiltinType,
    IntersectionType,
    NamedType,
    UnionType,
)

# Types that already admit null and reject the ? prefix
_NON_NULLABLE_NAMES = frozenset({"mixed", "null"})


def render_type(
    type_ref: BuiltinType | NamedType | IntersectionType | UnionType,
) -> str:
    """Render a type reference as it appears in a declaration.

    Built-in types keep their bare name; named types are prefixed with the
    root namespace marker so they resolve the same inside any namespace.
    Intersections inside a union are parenthesised (DNF types).

    Raises:
        RenderError: If given something that is not a type reference

    """
    match type_ref:
        case UnionType(types=types):
            return "|".join(_render_union_member(t) for t in types)
        case IntersectionType(types=types):
            return "&".join(render_type(t) for t in types)
        case BuiltinType(name=name, nullable=nullable):
            text = name
        case NamedType(name=name, nullable=nullable):
            text = NAMESPACE_SEPARATOR + name
        case _:
            raise RenderError(f"Unsupported type reference: {type_ref!r}")

    if nullable and name.lower() not in _NON_NULLABLE_NAMES:
        return "?" + text
    return text


def _render_union_member(type_ref: BuiltinType | NamedType | IntersectionType) -> str:
    if isinstance(type_ref, IntersectionType):
        return f"({render_type(type_ref)})"
    return render_type(type_ref)


def qualify(name: str) -> str:
    """Return a class name as a fully qualified reference."""
    return NAMESPACE_SEPARATOR + name.lstrip(NAMESPACE_SEPARATOR)
