from __future__ import annotations

from typing import ClassVar

from a11ylint.aria.properties import is_aria_attribute_name
from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute
from a11ylint.roles.element_roles import normalize_tag

from .base import Finding, Rule, RuleContext

# elements that are never exposed to the accessibility tree
RESERVED_TAGS: frozenset[str] = frozenset(
    """
    base col colgroup head html link meta noembed noscript param picture script
    source style title track
    """.split()
)


def unsupported_elements_message(tag: str, name: str) -> str:
    return (
        f"{tag} elements do not support ARIA roles, states and properties. "
        f"Try removing the prop '{name}'."
    )


class NoUnsupportedElementsUseAriaRule(Rule):
    name: ClassVar[str] = "no-unsupported-elements-use-aria"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        tag = context.element.tag
        if normalize_tag(tag) not in RESERVED_TAGS:
            return None
        if attribute.name.lower() != "role" and not is_aria_attribute_name(attribute.name):
            return None
        return Finding(unsupported_elements_message(tag, attribute.name), attribute=attribute)
