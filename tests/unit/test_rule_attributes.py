from __future__ import annotations

import pytest

from a11ylint.diagnostics.models import Diagnostic, DiagnosticKind
from a11ylint.engine import RuleEngine
from a11ylint.markup.jsx import parse_jsx_element
from a11ylint.rules.alt_text import alt_text_message
from a11ylint.rules.aria_props import aria_props_message
from a11ylint.rules.proptypes import proptypes_message
from a11ylint.rules.tabindex import TABINDEX_NO_POSITIVE_MESSAGE

pytestmark = pytest.mark.unit


def _check(rule: str, source: str, options: object = None) -> list[Diagnostic]:
    engine = RuleEngine()
    engine.register(rule, options=options)
    return engine.check_element(parse_jsx_element(source))


# aria-proptypes


@pytest.mark.parametrize(
    "source",
    [
        "<div aria-hidden={true} />",
        '<div aria-hidden="true" />',
        '<div aria-hidden={"false"} />',
        "<div aria-hidden={!false} />",
        "<div aria-hidden />",
        '<div aria-hidden={!"yes"} />',
        "<div aria-hidden={foo} />",
        "<div aria-hidden={undefined} />",
        '<div aria-label="Close" />',
        "<div aria-label={`Close`} />",
        "<div aria-label={`${x}`} />",
        '<div aria-checked="mixed" />',
        "<div aria-checked={`mixed`} />",
        "<div aria-level={123} />",
        "<div aria-level={-123} />",
        "<div aria-level={+123} />",
        "<div aria-level={~123} />",
        '<div aria-level={"123"} />',
        "<div aria-valuemax={1.5} />",
        '<div aria-valuemax="-1.5" />',
        '<div aria-sort="ascending" />',
        '<div aria-sort="DESCENDING" />',
        '<div aria-relevant="additions text" />',
        '<div aria-foo="bar" />',
        '<div role="button" />',
    ],
)
def test_proptypes_valid(source: str) -> None:
    assert _check("aria-proptypes", source) == []


@pytest.mark.parametrize(
    ("source", "name", "value_type"),
    [
        ('<div aria-hidden="yes" />', "aria-hidden", "boolean"),
        ("<div aria-hidden={1} />", "aria-hidden", "boolean"),
        ("<div aria-hidden={null} />", "aria-hidden", "boolean"),
        ("<div aria-label />", "aria-label", "string"),
        ('<div aria-label="" />', "aria-label", "string"),
        ("<div aria-label={true} />", "aria-label", "string"),
        ('<div aria-checked="yes" />', "aria-checked", "tristate"),
        ('<div aria-level="abc" />', "aria-level", "integer"),
        ("<div aria-level={1.5} />", "aria-level", "integer"),
        ("<div aria-level />", "aria-level", "integer"),
        ('<div aria-valuemax="abc" />', "aria-valuemax", "number"),
        ('<div aria-sort="foo" />', "aria-sort", "token"),
        ('<div aria-sort="ascending descending" />', "aria-sort", "token"),
        ("<div aria-sort />", "aria-sort", "token"),
        ('<div aria-relevant="" />', "aria-relevant", "tokenlist"),
        ('<div aria-relevant="additions foo" />', "aria-relevant", "tokenlist"),
        ('<div ARIA-SORT="foo" />', "ARIA-SORT", "token"),
    ],
)
def test_proptypes_invalid(source: str, name: str, value_type: str) -> None:
    diagnostics = _check("aria-proptypes", source)
    assert [diagnostic.message for diagnostic in diagnostics] == [
        proptypes_message(name, value_type)
    ]
    assert diagnostics[0].kind is DiagnosticKind.ATTRIBUTE
    assert diagnostics[0].attribute == name


def test_proptypes_reports_each_invalid_attribute() -> None:
    diagnostics = _check("aria-proptypes", '<div aria-sort="foo" aria-hidden="yes" aria-level="2" />')
    assert [diagnostic.attribute for diagnostic in diagnostics] == ["aria-sort", "aria-hidden"]


# aria-props


@pytest.mark.parametrize(
    "source",
    ['<div aria-label="x" />', '<div ARIA-LABEL="x" />', '<div role="button" />', "<div />"],
)
def test_aria_props_valid(source: str) -> None:
    assert _check("aria-props", source) == []


def test_aria_props_invalid_names_the_attribute() -> None:
    diagnostics = _check("aria-props", '<div aria-labeledby="x" aria-label="y" />')
    assert [diagnostic.message for diagnostic in diagnostics] == [
        aria_props_message("aria-labeledby")
    ]
    assert aria_props_message("aria-foo") == (
        "aria-foo: This attribute is an invalid ARIA attribute."
    )


# tabindex-no-positive


@pytest.mark.parametrize(
    "source",
    [
        "<div />",
        '<div tabIndex="0" />',
        "<div tabIndex={0} />",
        "<div tabIndex={-1} />",
        '<div tabIndex="-1" />',
        "<div tabIndex={index} />",
        '<div tabIndex="abc" />',
        '<div tabIndex="" />',
        "<div tabIndex />",
        "<div tabIndex={null} />",
    ],
)
def test_tabindex_valid(source: str) -> None:
    assert _check("tabindex-no-positive", source) == []


@pytest.mark.parametrize(
    "source",
    ['<div tabIndex="1" />', "<div tabIndex={1} />", '<div tabindex=" 2 " />', "<div tabIndex={+3} />"],
)
def test_tabindex_invalid(source: str) -> None:
    diagnostics = _check("tabindex-no-positive", source)
    assert [diagnostic.message for diagnostic in diagnostics] == [TABINDEX_NO_POSITIVE_MESSAGE]
    assert diagnostics[0].kind is DiagnosticKind.ATTRIBUTE


# alt-text


@pytest.mark.parametrize(
    "source",
    [
        '<img alt="foo" />',
        '<img alt="" />',
        "<img alt={alt} />",
        "<img alt />",
        "<div />",
        "<Avatar />",
    ],
)
def test_alt_text_valid(source: str) -> None:
    assert _check("alt-text", source) == []


@pytest.mark.parametrize(
    ("source", "options", "tag"),
    [
        ("<img />", None, "img"),
        ('<img src="a.png" />', None, "img"),
        ("<img alt={null} />", None, "img"),
        ("<IMG />", None, "IMG"),
        ("<Avatar />", "Avatar", "Avatar"),
        ("<Avatar />", ["Image", "Avatar"], "Avatar"),
    ],
)
def test_alt_text_invalid(source: str, options: object, tag: str) -> None:
    diagnostics = _check("alt-text", source, options)
    assert [diagnostic.message for diagnostic in diagnostics] == [alt_text_message(tag)]
    assert diagnostics[0].kind is DiagnosticKind.ELEMENT


def test_alt_text_component_names_match_verbatim() -> None:
    assert _check("alt-text", "<avatar />", ["Avatar"]) == []
