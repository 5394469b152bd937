from __future__ import annotations

from typing import Any, ClassVar

from pydantic import TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import read_attribute_value

from .base import Finding, Rule, RuleContext, RuleOptions

ARIA_ROLE_MESSAGE = "Elements with ARIA roles must use a valid, non-abstract ARIA role."


class AriaRoleOptions(RuleOptions):
    ignore_non_dom: bool = False


class AriaRoleRule(Rule):
    """Every token of a literal ``role`` must name a concrete ARIA role.

    A literal ``null`` role is dropped by the host and never reported.
    """

    name: ClassVar[str] = "aria-role"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE
    options_schema: ClassVar[TypeAdapter[Any]] = TypeAdapter(AriaRoleOptions | None)
    default_options: ClassVar[Any] = AriaRoleOptions()

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        if attribute.name.lower() != "role":
            return None
        options: AriaRoleOptions = context.options
        if options.ignore_non_dom and not context.semantics.is_dom:
            return None
        read = read_attribute_value(attribute)
        if not read.is_literal or read.value is None:
            return None
        if isinstance(read.value, str) and self._all_concrete(context, read.value):
            return None
        return Finding(ARIA_ROLE_MESSAGE, attribute=attribute)

    def _all_concrete(self, context: RuleContext, value: str) -> bool:
        tokens = value.split()
        if not tokens:
            return False
        for token in tokens:
            definition = context.registry.get_role_metadata(token)
            if definition is None or definition.abstract:
                return False
        return True
