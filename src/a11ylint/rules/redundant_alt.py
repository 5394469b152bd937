from __future__ import annotations

import re
from typing import Any, ClassVar

from pydantic import TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.markup.reader import read_attribute
from a11ylint.roles.element_roles import normalize_tag

from .base import Finding, Rule, RuleContext, RuleOptions, UniqueNames

REDUNDANT_WORDS: tuple[str, ...] = ("image", "photo", "picture")

REDUNDANT_ALT_MESSAGE = (
    "Redundant alt attribute. Screen-readers already announce `img` tags as an image. "
    "You don't need to use the words `image`, `photo`, or `picture` "
    "(or any specified custom words) in the alt prop."
)


class RedundantAltOptions(RuleOptions):
    components: UniqueNames = ()
    words: UniqueNames = ()

    def pattern(self) -> re.Pattern[str]:
        words = (*REDUNDANT_WORDS, *self.words)
        alternation = "|".join(re.escape(word) for word in words)
        return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


class RedundantAltRule(Rule):
    """Literal ``alt`` text on images must not restate that it describes an image.

    Words match whole and case-insensitively. Elements hidden from assistive
    technology are skipped.
    """

    name: ClassVar[str] = "redundant-alt"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ELEMENT
    options_schema: ClassVar[TypeAdapter[Any]] = TypeAdapter(RedundantAltOptions | None)
    default_options: ClassVar[Any] = RedundantAltOptions()

    def check_element(self, context: RuleContext) -> Finding | None:
        options: RedundantAltOptions = context.options
        tag = context.element.tag
        if normalize_tag(tag) != "img" and tag not in options.components:
            return None
        if context.semantics.hidden:
            return None
        read = read_attribute(context.element.attributes, "alt")
        if not read.is_literal or not isinstance(read.value, str):
            return None
        if options.pattern().search(read.value) is None:
            return None
        return Finding(REDUNDANT_ALT_MESSAGE)
