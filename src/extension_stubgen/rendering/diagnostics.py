"""Non-fatal diagnostics collected while rendering a stub."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["warning", "error"]


@dataclass(frozen=True)
class Diagnostic:
    """A problem found while rendering one construct.

    Diagnostics never abort rendering: warnings mark degraded output (such
    as a placeholder default), errors mark a construct that was skipped.
    """

    severity: Severity
    construct: str
    message: str
