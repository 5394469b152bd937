from __future__ import annotations

from typing import ClassVar

from a11ylint.aria.properties import get_property, is_aria_attribute_name
from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute

from .base import Finding, Rule, RuleContext


def aria_props_message(name: str) -> str:
    return f"{name}: This attribute is an invalid ARIA attribute."


class AriaPropsRule(Rule):
    name: ClassVar[str] = "aria-props"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        del context
        if not is_aria_attribute_name(attribute.name) or get_property(attribute.name) is not None:
            return None
        return Finding(aria_props_message(attribute.name), attribute=attribute)
