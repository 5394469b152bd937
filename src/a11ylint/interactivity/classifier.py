from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import AttributeRead, read_attribute
from a11ylint.roles.element_roles import is_dom_tag, normalize_tag
from a11ylint.roles.registry import DEFAULT_ROLE_REGISTRY, RoleDefinition, RoleRegistry
from a11ylint.roles.taxonomy import PRESENTATIONAL_ROLES

from .tables import (
    TAG_DECISIONS,
    AlwaysInteractive,
    AlwaysNonInteractive,
    AttributePredicate,
    ConditionalOnAttribute,
    DelegateToRole,
    Interactivity,
    PredicateKind,
    TagDecision,
)


@dataclass(frozen=True, slots=True)
class RoleVerdict:
    interactivity: Interactivity
    presentational: bool = False


@dataclass(frozen=True, slots=True)
class ElementSemantics:
    """Facts about one element visit; built fresh and never cached across elements."""

    tag: str
    is_dom: bool
    hidden: bool
    presentational: bool
    interactivity: Interactivity
    role_read: AttributeRead
    explicit_roles: tuple[str, ...]
    implicit_roles: tuple[str, ...]

    @property
    def implicit_role(self) -> str | None:
        return self.implicit_roles[0] if self.implicit_roles else None


class InteractivityClassifier:
    __slots__ = ("_decisions", "_registry")

    def __init__(
        self,
        registry: RoleRegistry = DEFAULT_ROLE_REGISTRY,
        decisions: Mapping[str, TagDecision] = TAG_DECISIONS,
    ) -> None:
        self._registry = registry
        self._decisions = decisions

    @property
    def registry(self) -> RoleRegistry:
        return self._registry

    def is_hidden_from_assistive_tech(self, tag: str, attributes: Sequence[Attribute]) -> bool:
        if normalize_tag(tag) == "input":
            input_type = read_attribute(attributes, "type")
            if (
                input_type.is_literal
                and isinstance(input_type.value, str)
                and input_type.value.lower() == "hidden"
            ):
                return True
        aria_hidden = read_attribute(attributes, "aria-hidden")
        if not aria_hidden.is_literal:
            return False
        if aria_hidden.value is True:
            return True
        return isinstance(aria_hidden.value, str) and aria_hidden.value.lower() == "true"

    def explicit_role_tokens(self, attributes: Sequence[Attribute]) -> tuple[str, ...] | None:
        """Lower-cased ``role`` tokens, or ``None`` when no literal role is usable."""
        role = read_attribute(attributes, "role")
        if not role.is_literal or not isinstance(role.value, str):
            return None
        tokens = tuple(role.value.lower().split())
        return tokens or None

    def classify_roles(self, role_names: Iterable[str]) -> RoleVerdict:
        definitions = self._known_concrete_roles(role_names)
        if any(definition.name in PRESENTATIONAL_ROLES for definition in definitions):
            return RoleVerdict(Interactivity.NON_INTERACTIVE, presentational=True)
        if any(definition.interactive for definition in definitions):
            return RoleVerdict(Interactivity.INTERACTIVE)
        if definitions:
            return RoleVerdict(Interactivity.NON_INTERACTIVE)
        return RoleVerdict(Interactivity.INDETERMINATE)

    def classify(self, tag: str, attributes: Sequence[Attribute]) -> Interactivity:
        return self._verdict(tag, attributes).interactivity

    def describe(self, tag: str, attributes: Sequence[Attribute]) -> ElementSemantics:
        tokens = self.explicit_role_tokens(attributes) or ()
        verdict = self._verdict(tag, attributes)
        return ElementSemantics(
            tag=tag,
            is_dom=is_dom_tag(tag),
            hidden=self.is_hidden_from_assistive_tech(tag, attributes),
            presentational=verdict.presentational,
            interactivity=verdict.interactivity,
            role_read=read_attribute(attributes, "role"),
            explicit_roles=tuple(
                token for token in tokens if self._registry.get_role_metadata(token) is not None
            ),
            implicit_roles=self._registry.get_implicit_roles(tag, attributes),
        )

    def _verdict(self, tag: str, attributes: Sequence[Attribute]) -> RoleVerdict:
        tokens = self.explicit_role_tokens(attributes)
        if tokens is not None:
            return self.classify_roles(tokens)
        decision = self._decisions.get(normalize_tag(tag))
        if decision is None:
            return RoleVerdict(Interactivity.INDETERMINATE)
        return self._apply_decision(decision, tag, attributes)

    def _apply_decision(
        self, decision: TagDecision, tag: str, attributes: Sequence[Attribute]
    ) -> RoleVerdict:
        if isinstance(decision, AlwaysInteractive):
            return RoleVerdict(Interactivity.INTERACTIVE)
        if isinstance(decision, AlwaysNonInteractive):
            return RoleVerdict(Interactivity.NON_INTERACTIVE)
        if isinstance(decision, ConditionalOnAttribute):
            if _predicate_matches(decision.predicate, attributes):
                return RoleVerdict(decision.when_matched)
            return RoleVerdict(decision.otherwise)
        if isinstance(decision, DelegateToRole):
            return self.classify_roles(self._registry.get_implicit_roles(tag, attributes))
        raise TypeError(f"unsupported tag decision: {type(decision).__name__}")

    def _known_concrete_roles(self, role_names: Iterable[str]) -> tuple[RoleDefinition, ...]:
        definitions: list[RoleDefinition] = []
        for name in role_names:
            definition = self._registry.get_role_metadata(name)
            if definition is not None and not definition.abstract:
                definitions.append(definition)
        return tuple(definitions)


def _predicate_matches(predicate: AttributePredicate, attributes: Sequence[Attribute]) -> bool:
    reads = tuple(read_attribute(attributes, name) for name in predicate.attributes)
    if predicate.kind is PredicateKind.ANY_DEFINED:
        return any(read.is_defined for read in reads)
    expected = (predicate.value or "").lower()
    return any(
        read.is_literal and isinstance(read.value, str) and read.value.lower() == expected
        for read in reads
    )


DEFAULT_CLASSIFIER = InteractivityClassifier()
