"""Tests for type reference rendering."""

import pytest

from extension_stubgen.errors import RenderError
from extension_stubgen.metadata import (
    BuiltinType,
    IntersectionType,
    NamedType,
    UnionType,
)
from extension_stubgen.rendering import qualify, render_type


class TestRenderType:
    """Tests for render_type."""

    def test_builtin_is_bare(self) -> None:
        """Built-in types render their bare name."""
        assert render_type(BuiltinType(name="int")) == "int"

    def test_named_is_fully_qualified(self) -> None:
        """User types get the root namespace marker."""
        assert render_type(NamedType(name="App\\Model")) == "\\App\\Model"

    def test_named_with_leading_separator_is_not_doubled(self) -> None:
        """An already qualified name keeps a single marker."""
        assert render_type(NamedType(name="\\Countable")) == "\\Countable"

    def test_nullable(self) -> None:
        """Nullable types get a ? prefix."""
        assert render_type(BuiltinType(name="int", nullable=True)) == "?int"
        assert render_type(NamedType(name="App\\Model", nullable=True)) == (
            "?\\App\\Model"
        )

    def test_mixed_and_null_are_never_prefixed(self) -> None:
        """mixed and null already admit null."""
        assert render_type(BuiltinType(name="mixed", nullable=True)) == "mixed"
        assert render_type(BuiltinType(name="null", nullable=True)) == "null"

    def test_union(self) -> None:
        """Union members render individually, joined by |."""
        union = UnionType(
            types=[
                BuiltinType(name="int"),
                NamedType(name="App\\Id"),
                BuiltinType(name="null"),
            ]
        )

        assert render_type(union) == "int|\\App\\Id|null"

    def test_intersection_qualifies_every_member(self) -> None:
        """Each member of an intersection is fully qualified."""
        intersection = IntersectionType(
            types=[NamedType(name="Countable"), NamedType(name="App\\Sized")]
        )

        assert render_type(intersection) == "\\Countable&\\App\\Sized"

    def test_intersection_inside_union_is_parenthesised(self) -> None:
        """DNF types wrap their intersections in parentheses."""
        union = UnionType(
            types=[
                IntersectionType(
                    types=[NamedType(name="Countable"), NamedType(name="Traversable")]
                ),
                BuiltinType(name="null"),
            ]
        )

        assert render_type(union) == "(\\Countable&\\Traversable)|null"

    def test_non_type_fails_fast(self) -> None:
        """Anything that is not a type reference violates the oracle contract."""
        with pytest.raises(RenderError):
            render_type("int")  # type: ignore[arg-type]


class TestQualify:
    """Tests for qualify."""

    def test_qualify(self) -> None:
        """Class names are prefixed exactly once."""
        assert qualify("App\\Base") == "\\App\\Base"
        assert qualify("\\App\\Base") == "\\App\\Base"
