from __future__ import annotations

from typing import Any, ClassVar

from pydantic import TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.reader import read_attribute
from a11ylint.roles.element_roles import normalize_tag

from .base import ComponentNames, Finding, NonEmptyName, Rule, RuleContext


def alt_text_message(tag: str) -> str:
    return f"{tag} elements must have an alt tag."


class AltTextRule(Rule):
    """``img`` plus any configured component names must carry a defined ``alt``.

    Options are a single component name or a non-empty list of unique names;
    component names match verbatim.
    """

    name: ClassVar[str] = "alt-text"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ELEMENT
    options_schema: ClassVar[TypeAdapter[Any]] = TypeAdapter(NonEmptyName | ComponentNames | None)
    default_options: ClassVar[Any] = ()

    def validate_options(self, raw: object) -> tuple[str, ...]:
        options = super().validate_options(raw)
        if isinstance(options, str):
            return (options,)
        return tuple(options)

    def check_element(self, context: RuleContext) -> Finding | None:
        tag = context.element.tag
        if normalize_tag(tag) != "img" and tag not in context.options:
            return None
        if read_attribute(context.element.attributes, "alt").is_defined:
            return None
        return Finding(alt_text_message(tag))
