from __future__ import annotations

from typing import ClassVar

from a11ylint.aria.grammar import describe_type, validate
from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import read_attribute_value

from .base import Finding, Rule, RuleContext


def proptypes_message(name: str, value_type: str) -> str:
    return f"{name} must be of type {value_type}."


class AriaProptypesRule(Rule):
    name: ClassVar[str] = "aria-proptypes"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        del context
        value_type = describe_type(attribute.name)
        if value_type is None:
            return None
        if validate(attribute.name, read_attribute_value(attribute)):
            return None
        return Finding(proptypes_message(attribute.name, value_type), attribute=attribute)
