"""Metadata-to-text renderers for stub constructs."""

from .constructs import ConstructRenderer, Fragment
from .diagnostics import Diagnostic
from .literals import export_literal
from .members import MemberRenderer
from .types import qualify, render_type

__all__ = [
    "ConstructRenderer",
    "Diagnostic",
    "Fragment",
    "MemberRenderer",
    "export_literal",
    "qualify",
    "render_type",
]
