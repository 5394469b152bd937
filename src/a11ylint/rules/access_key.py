from __future__ import annotations

from typing import ClassVar

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import read_attribute_value

from .base import Finding, Rule, RuleContext

NO_ACCESS_KEY_MESSAGE = (
    "No access key attribute allowed. Inconsistencies between keyboard shortcuts and "
    "keyboard commands used by screenreader and keyboard only users create a11y "
    "complications."
)


class NoAccessKeyRule(Rule):
    """Reports ``accessKey`` only when its literal value is truthy.

    Expression values are skipped; they may well evaluate to nothing.
    """

    name: ClassVar[str] = "no-access-key"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        del context
        if attribute.name.lower() != "accesskey":
            return None
        read = read_attribute_value(attribute)
        if not read.is_literal or not read.value:
            return None
        return Finding(NO_ACCESS_KEY_MESSAGE, attribute=attribute)
