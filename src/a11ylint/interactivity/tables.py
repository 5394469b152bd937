from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from a11ylint.errors import InternalInvariantError
from a11ylint.roles.element_roles import DOM_TAGS, ELEMENT_ROLE_ENTRIES


class Interactivity(StrEnum):
    INTERACTIVE = "interactive"
    NON_INTERACTIVE = "non_interactive"
    INDETERMINATE = "indeterminate"


class PredicateKind(StrEnum):
    ANY_DEFINED = "any_defined"
    LITERAL_EQUALS = "literal_equals"


@dataclass(frozen=True, slots=True)
class AttributePredicate:
    attributes: tuple[str, ...]
    kind: PredicateKind
    value: str | None = None

    def __post_init__(self) -> None:
        if not self.attributes:
            raise InternalInvariantError(
                "E_TABLE_PREDICATE_INVALID", "attribute predicate must name an attribute"
            )
        if (self.kind is PredicateKind.LITERAL_EQUALS) != (self.value is not None):
            raise InternalInvariantError(
                "E_TABLE_PREDICATE_INVALID", "only literal_equals predicates carry a value"
            )


@dataclass(frozen=True, slots=True)
class AlwaysInteractive:
    pass


@dataclass(frozen=True, slots=True)
class AlwaysNonInteractive:
    pass


@dataclass(frozen=True, slots=True)
class ConditionalOnAttribute:
    predicate: AttributePredicate
    when_matched: Interactivity
    otherwise: Interactivity


@dataclass(frozen=True, slots=True)
class DelegateToRole:
    pass


type TagDecision = AlwaysInteractive | AlwaysNonInteractive | ConditionalOnAttribute | DelegateToRole

ALWAYS_INTERACTIVE = AlwaysInteractive()
ALWAYS_NON_INTERACTIVE = AlwaysNonInteractive()
DELEGATE_TO_ROLE = DelegateToRole()

ANCHOR_LIKE = ConditionalOnAttribute(
    predicate=AttributePredicate(("href", "tabIndex"), PredicateKind.ANY_DEFINED),
    when_matched=Interactivity.INTERACTIVE,
    otherwise=Interactivity.INDETERMINATE,
)
HIDDEN_INPUT = ConditionalOnAttribute(
    predicate=AttributePredicate(("type",), PredicateKind.LITERAL_EQUALS, "hidden"),
    when_matched=Interactivity.NON_INTERACTIVE,
    otherwise=Interactivity.INTERACTIVE,
)

INTERACTIVE_TAGS: frozenset[str] = frozenset(
    ("audio", "button", "menuitem", "option", "select", "textarea", "video")
)

# content elements without an implicit role, plus elements whose implicit role
# would otherwise read as a widget
NON_INTERACTIVE_TAGS: frozenset[str] = frozenset(
    """
    blockquote br caption dir dl figcaption frame iframe img legend mark marquee
    meter p pre progress ruby time
    """.split()
)

# associated with an interactive role elsewhere in the taxonomy but never
# counted as interactive in HTML; <link onClick> is reported, while role="scrollbar"
# inherits from range and counts as interactive
HARD_CODED_NON_INTERACTIVE_TAGS: frozenset[str] = frozenset(("link",))

# carry an implicit role but have no interactive valence of their own
STATIC_TAGS: frozenset[str] = frozenset(("body",))


def _build_decisions(
    overrides: Mapping[str, TagDecision], role_mapped_tags: Iterable[str]
) -> Mapping[str, TagDecision]:
    decisions: dict[str, TagDecision] = {}
    for tag in sorted(set(role_mapped_tags)):
        if tag not in STATIC_TAGS:
            decisions[tag] = DELEGATE_TO_ROLE
    for tag, decision in overrides.items():
        if tag not in DOM_TAGS:
            raise InternalInvariantError(
                "E_TABLE_TAG_UNKNOWN", f"interactivity table names unknown tag '{tag}'"
            )
        decisions[tag] = decision
    return MappingProxyType(decisions)


def _explicit_decisions() -> dict[str, TagDecision]:
    explicit: dict[str, TagDecision] = {"a": ANCHOR_LIKE, "area": ANCHOR_LIKE, "input": HIDDEN_INPUT}
    overlapping = INTERACTIVE_TAGS & (NON_INTERACTIVE_TAGS | HARD_CODED_NON_INTERACTIVE_TAGS)
    if overlapping:
        raise InternalInvariantError(
            "E_TABLE_TAG_CONFLICT",
            f"tags listed as both interactive and non-interactive: {sorted(overlapping)}",
        )
    for tag in INTERACTIVE_TAGS:
        explicit[tag] = ALWAYS_INTERACTIVE
    for tag in NON_INTERACTIVE_TAGS | HARD_CODED_NON_INTERACTIVE_TAGS:
        explicit[tag] = ALWAYS_NON_INTERACTIVE
    return explicit


TAG_DECISIONS: Mapping[str, TagDecision] = _build_decisions(
    _explicit_decisions(),
    (entry.tag for entry in ELEMENT_ROLE_ENTRIES),
)
