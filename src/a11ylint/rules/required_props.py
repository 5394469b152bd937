from __future__ import annotations

from typing import ClassVar

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import read_attribute, read_attribute_value

from .base import Finding, Rule, RuleContext


def required_props_message(role: str, props: tuple[str, ...]) -> str:
    return (
        f'Elements with the ARIA role "{role}" must have the following '
        f"attributes defined: {' '.join(prop.lower() for prop in props)}"
    )


class RoleHasRequiredAriaPropsRule(Rule):
    """Explicit roles must come with every property the role requires.

    Reported on the ``role`` attribute, naming the first role token whose
    required set is incomplete.
    """

    name: ClassVar[str] = "role-has-required-aria-props"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        if attribute.name.lower() != "role":
            return None
        read = read_attribute_value(attribute)
        if not read.is_literal or not isinstance(read.value, str):
            return None

        attributes = context.element.attributes
        for token in read.value.lower().split():
            definition = context.registry.get_role_metadata(token)
            if definition is None or definition.abstract or not definition.required_props:
                continue
            if all(read_attribute(attributes, prop).is_defined for prop in definition.required_props):
                continue
            return Finding(
                required_props_message(definition.name, definition.required_props),
                attribute=attribute,
            )
        return None
