from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.interactivity.tables import Interactivity
from a11ylint.markup.reader import read_attribute_value
from a11ylint.roles.element_roles import normalize_tag

from .base import Finding, Rule, RuleContext, RuleOptions, UniqueNames
from .handlers import INTERACTION_HANDLERS

NONINTERACTIVE_INTERACTIONS_MESSAGE = (
    "Non-interactive elements should not be assigned mouse or keyboard event listeners."
)


class HandlerOptions(RuleOptions):
    handlers: UniqueNames = INTERACTION_HANDLERS
    alert: UniqueNames = ()
    body: UniqueNames = ()
    dialog: UniqueNames = ()
    iframe: UniqueNames = ()
    img: UniqueNames = ()

    def exemptions(self) -> Mapping[str, frozenset[str]]:
        return {
            tag: frozenset(handler.lower() for handler in getattr(self, tag))
            for tag in ("alert", "body", "dialog", "iframe", "img")
        }


def _exempt_handlers(options: HandlerOptions, context: RuleContext) -> frozenset[str]:
    # exemption keys name either the tag or one of its explicit role tokens
    exemptions = options.exemptions()
    keys = (normalize_tag(context.element.tag), *context.semantics.explicit_roles)
    return frozenset().union(*(exemptions.get(key, frozenset()) for key in keys))


class NoNoninteractiveElementInteractionsRule(Rule):
    name: ClassVar[str] = "no-noninteractive-element-interactions"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ELEMENT
    options_schema: ClassVar[TypeAdapter[Any]] = TypeAdapter(HandlerOptions | None)
    default_options: ClassVar[Any] = HandlerOptions()

    def check_element(self, context: RuleContext) -> Finding | None:
        semantics = context.semantics
        if not semantics.is_dom or semantics.hidden or semantics.presentational:
            return None
        if semantics.interactivity is not Interactivity.NON_INTERACTIVE:
            return None

        options: HandlerOptions = context.options
        attribute_names = {attribute.name.lower() for attribute in context.element.attributes}
        if attribute_names & _exempt_handlers(options, context):
            return None

        handlers = {handler.lower() for handler in options.handlers}
        for attribute in context.element.attributes:
            if attribute.name.lower() in handlers and read_attribute_value(attribute).is_defined:
                return Finding(NONINTERACTIVE_INTERACTIONS_MESSAGE)
        return None
