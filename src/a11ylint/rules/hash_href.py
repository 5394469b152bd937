from __future__ import annotations

from typing import Any, ClassVar

from pydantic import TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import read_attribute_value
from a11ylint.roles.element_roles import normalize_tag

from .base import ComponentNames, Finding, NonEmptyName, Rule, RuleContext

NO_HASH_HREF_MESSAGE = (
    'Links must not point to "#". Use a more descriptive href or use a button instead.'
)


class NoHashHrefRule(Rule):
    """``href="#"`` on anchors and configured link components."""

    name: ClassVar[str] = "no-hash-href"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ATTRIBUTE
    options_schema: ClassVar[TypeAdapter[Any]] = TypeAdapter(NonEmptyName | ComponentNames | None)
    default_options: ClassVar[Any] = ()

    def validate_options(self, raw: object) -> tuple[str, ...]:
        options = super().validate_options(raw)
        if isinstance(options, str):
            return (options,)
        return tuple(options)

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        tag = context.element.tag
        if normalize_tag(tag) != "a" and tag not in context.options:
            return None
        if attribute.name.lower() != "href":
            return None
        read = read_attribute_value(attribute)
        if not read.is_literal or read.value != "#":
            return None
        return Finding(NO_HASH_HREF_MESSAGE, attribute=attribute)
