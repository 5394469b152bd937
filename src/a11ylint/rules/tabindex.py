from __future__ import annotations

import math
from typing import ClassVar

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute, LiteralScalar
from a11ylint.markup.reader import read_attribute_value

from .base import Finding, Rule, RuleContext

TABINDEX_NO_POSITIVE_MESSAGE = "Avoid positive integer values for tabIndex."


def _numeric_value(value: LiteralScalar) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        return float(value)
    stripped = value.strip()
    if not stripped:
        return 0.0
    try:
        number = float(stripped)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class TabindexNoPositiveRule(Rule):
    """Only literal values are checked; anything non-numeric passes."""

    name: ClassVar[str] = "tabindex-no-positive"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        del context
        if attribute.name.lower() != "tabindex":
            return None
        read = read_attribute_value(attribute)
        if not read.is_literal:
            return None
        number = _numeric_value(read.value)
        if number is None or number <= 0:
            return None
        return Finding(TABINDEX_NO_POSITIVE_MESSAGE, attribute=attribute)
