"""PHP literal rendering for constant values and parameter defaults."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from extension_stubgen.errors import RenderError

# PHP parses -9223372036854775808 as a negated float literal
_PHP_INT_MIN = -(2**63)


def export_literal(value: Any) -> str:
    """Render a Python value as a PHP literal that parses back to it.

    Args:
        value: None, bool, int, float, str, or a list/mapping of those

    Returns:
        PHP source text of the literal

    Raises:
        RenderError: If the value has no PHP literal form

    """
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if value == _PHP_INT_MIN:
            return "-9223372036854775807-1"
        return str(value)
    if isinstance(value, float):
        return _export_float(value)
    if isinstance(value, str):
        return _export_string(value)
    if isinstance(value, Mapping):
        items = [
            f"{_export_key(k)} => {export_literal(v)}" for k, v in value.items()
        ]
        return "[" + ", ".join(items) + "]"
    if isinstance(value, Sequence):
        return "[" + ", ".join(export_literal(v) for v in value) + "]"

    raise RenderError(f"Cannot render {type(value).__name__} value as a PHP literal")


def _export_float(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    text = repr(value)
    if not any(c in text for c in ".eE"):
        text += ".0"
    return text


def _export_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _export_key(key: Any) -> str:
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise RenderError(f"Cannot use {type(key).__name__} as a PHP array key")
    return export_literal(key)
