from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from a11ylint.engine import RuleEngine
from a11ylint.interactivity.classifier import DEFAULT_CLASSIFIER
from a11ylint.interactivity.tables import Interactivity
from a11ylint.markup.models import Attribute, ExpressionValue, LiteralValue, MarkupElement
from a11ylint.roles.registry import DEFAULT_ROLE_REGISTRY
from a11ylint.roles.taxonomy import PRESENTATIONAL_ROLES
from a11ylint.rules.handlers import INTERACTION_HANDLERS

pytestmark = pytest.mark.property

_REGISTRY = DEFAULT_ROLE_REGISTRY
_ROLE_NAMES = _REGISTRY.role_names()
_ABSTRACT_ROLES = [name for name in _ROLE_NAMES if _REGISTRY.is_abstract_role(name)]
_CONCRETE_ROLES = [name for name in _ROLE_NAMES if not _REGISTRY.is_abstract_role(name)]
_TAGS = st.sampled_from(["div", "span", "a", "button", "article", "li", "input", "td", "Widget"])


def _role(value: str) -> Attribute:
    return Attribute("role", LiteralValue(value))


@given(role=st.sampled_from(_CONCRETE_ROLES), tag=_TAGS, upper=st.booleans())
def test_concrete_role_decides_interactivity_on_any_tag(role: str, tag: str, upper: bool) -> None:
    written = role.upper() if upper else role
    verdict = DEFAULT_CLASSIFIER.classify(tag, (_role(written),))
    if role in PRESENTATIONAL_ROLES:
        assert verdict is Interactivity.NON_INTERACTIVE
    elif _REGISTRY.is_interactive_role(role):
        assert verdict is Interactivity.INTERACTIVE
    else:
        assert verdict is Interactivity.NON_INTERACTIVE


@given(role=st.sampled_from(_ABSTRACT_ROLES))
def test_abstract_roles_alone_are_indeterminate(role: str) -> None:
    assert DEFAULT_CLASSIFIER.classify("div", (_role(role),)) is Interactivity.INDETERMINATE


@given(
    roles=st.lists(st.sampled_from(_CONCRETE_ROLES), min_size=1, max_size=4),
    junk=st.lists(st.from_regex(r"zz[a-z]{1,6}", fullmatch=True), max_size=2),
)
def test_any_interactive_token_wins_unless_presentational(
    roles: list[str], junk: list[str]
) -> None:
    assume(not any(role in PRESENTATIONAL_ROLES for role in roles))
    verdict = DEFAULT_CLASSIFIER.classify("div", (_role(" ".join([*junk, *roles])),))
    expected = (
        Interactivity.INTERACTIVE
        if any(_REGISTRY.is_interactive_role(role) for role in roles)
        else Interactivity.NON_INTERACTIVE
    )
    assert verdict is expected


@given(tag=_TAGS, source=st.sampled_from(["role", "kind", "props.role", "undefined"]))
def test_unresolvable_role_matches_the_roleless_verdict(tag: str, source: str) -> None:
    with_role = DEFAULT_CLASSIFIER.classify(tag, (Attribute("role", ExpressionValue(source)),))
    assert with_role is DEFAULT_CLASSIFIER.classify(tag, ())


@given(
    tag=st.sampled_from(["article", "li", "section", "h2", "nav", "p", "ul"]),
    handler=st.sampled_from(INTERACTION_HANDLERS),
    hidden=st.sampled_from([None, LiteralValue(True), LiteralValue("true")]),
)
def test_hidden_elements_never_trigger_the_handler_rule(
    tag: str, handler: str, hidden: LiteralValue | None
) -> None:
    engine = RuleEngine()
    engine.register("no-noninteractive-element-interactions")
    attributes = [Attribute(handler, ExpressionValue("onEvent"))]
    attributes.append(Attribute("aria-hidden", hidden))
    diagnostics = engine.check_element(MarkupElement(tag=tag, attributes=tuple(attributes)))
    assert diagnostics == []
