from __future__ import annotations

import pytest

from a11ylint.diagnostics.models import Diagnostic, DiagnosticKind
from a11ylint.engine import RuleEngine
from a11ylint.errors import ConfigErrorCode, ConfigurationError
from a11ylint.markup.jsx import parse_jsx_element
from a11ylint.rules.access_key import NO_ACCESS_KEY_MESSAGE
from a11ylint.rules.hash_href import NO_HASH_HREF_MESSAGE
from a11ylint.rules.redundant_alt import REDUNDANT_ALT_MESSAGE
from a11ylint.rules.unsupported_elements import RESERVED_TAGS, unsupported_elements_message

pytestmark = pytest.mark.unit


def _check(rule: str, source: str, options: object = None) -> list[Diagnostic]:
    engine = RuleEngine()
    engine.register(rule, options=options)
    return engine.check_element(parse_jsx_element(source))


# no-unsupported-elements-use-aria


@pytest.mark.parametrize(
    "source",
    [
        "<meta />",
        '<meta charset="utf-8" />',
        '<script src="a.js" />',
        '<div role="button" aria-label="x" />',
        '<MetaTag aria-hidden="true" />',
        '<link rel="stylesheet" ariaHidden />',
    ],
)
def test_unsupported_elements_valid(source: str) -> None:
    assert _check("no-unsupported-elements-use-aria", source) == []


@pytest.mark.parametrize(
    ("source", "tag", "name"),
    [
        ('<meta aria-hidden="false" />', "meta", "aria-hidden"),
        ('<script role="button" />', "script", "role"),
        ("<html aria-label={label} />", "html", "aria-label"),
        ('<STYLE aria-foo="x" />', "STYLE", "aria-foo"),
        ('<track ROLE="img" />', "track", "ROLE"),
    ],
)
def test_unsupported_elements_invalid(source: str, tag: str, name: str) -> None:
    diagnostics = _check("no-unsupported-elements-use-aria", source)
    assert [diagnostic.message for diagnostic in diagnostics] == [
        unsupported_elements_message(tag, name)
    ]
    assert diagnostics[0].kind is DiagnosticKind.ATTRIBUTE
    assert diagnostics[0].attribute == name


def test_unsupported_elements_reports_every_offending_attribute() -> None:
    diagnostics = _check(
        "no-unsupported-elements-use-aria", '<meta role="none" name="x" aria-hidden />'
    )
    assert [diagnostic.attribute for diagnostic in diagnostics] == ["role", "aria-hidden"]


def test_reserved_tags_are_known_dom_tags() -> None:
    assert {"meta", "script", "html", "noembed"} <= RESERVED_TAGS
    assert "div" not in RESERVED_TAGS


# no-access-key


@pytest.mark.parametrize(
    "source",
    [
        "<div />",
        '<div accessKey="" />',
        "<div accessKey={undefined} />",
        "<div accessKey={null} />",
        "<div accessKey={false} />",
        "<div accessKey={0} />",
        "<div accessKey={key} />",
    ],
)
def test_access_key_valid(source: str) -> None:
    assert _check("no-access-key", source) == []


@pytest.mark.parametrize(
    "source",
    [
        '<div accessKey="h" />',
        '<div accesskey="h" />',
        "<div accessKey />",
        '<div accessKey={"h"} />',
        "<div accessKey={`h`} />",
        "<div accessKey={1} />",
    ],
)
def test_access_key_invalid(source: str) -> None:
    diagnostics = _check("no-access-key", source)
    assert [diagnostic.message for diagnostic in diagnostics] == [NO_ACCESS_KEY_MESSAGE]
    assert diagnostics[0].kind is DiagnosticKind.ATTRIBUTE


# redundant-alt


@pytest.mark.parametrize(
    "source",
    [
        "<img />",
        '<img alt="foo" />',
        '<img alt="" />',
        '<img alt="picturesque view" />',
        '<img alt="photography class" />',
        "<img alt={altText} />",
        '<img alt="a photo" aria-hidden />',
        '<img alt="a photo" aria-hidden="true" />',
        '<div alt="an image" />',
        '<Avatar alt="an image" />',
    ],
)
def test_redundant_alt_valid(source: str) -> None:
    assert _check("redundant-alt", source) == []


@pytest.mark.parametrize(
    "source",
    [
        '<img alt="Photo of friend." />',
        '<img alt="Picture of friend." />',
        '<img alt="Image of friend." />',
        '<img alt="PhOtO of friend." />',
        "<img alt={`image of cat`} />",
        '<img alt="a photo" aria-hidden={false} />',
        '<IMG alt="image" />',
    ],
)
def test_redundant_alt_invalid(source: str) -> None:
    diagnostics = _check("redundant-alt", source)
    assert [diagnostic.message for diagnostic in diagnostics] == [REDUNDANT_ALT_MESSAGE]
    assert diagnostics[0].kind is DiagnosticKind.ELEMENT


def test_redundant_alt_custom_words_and_components() -> None:
    options = {"components": ["Image"], "words": ["Bild"]}
    assert len(_check("redundant-alt", '<img alt="Das Bild" />', options)) == 1
    assert len(_check("redundant-alt", '<Image alt="a photo" />', options)) == 1
    assert _check("redundant-alt", '<Image alt="friends" />', options) == []
    assert _check("redundant-alt", '<img alt="Bildung" />', options) == []


def test_redundant_alt_rejects_unknown_option_keys() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        RuleEngine().register("redundant-alt", options={"word": ["x"]})
    assert exc_info.value.detail.code == ConfigErrorCode.E_CONFIG_OPTIONS_INVALID


# no-hash-href


@pytest.mark.parametrize(
    "source",
    [
        "<a />",
        '<a href="foo" />',
        '<a href="#section" />',
        "<a href={foo} />",
        "<a href />",
        '<div href="#" />',
        '<Link href="#" />',
    ],
)
def test_hash_href_valid(source: str) -> None:
    assert _check("no-hash-href", source) == []


@pytest.mark.parametrize(
    ("source", "options"),
    [
        ('<a href="#" />', None),
        ('<A HREF="#" />', None),
        ('<a href={"#"} />', None),
        ("<a href={`#`} />", None),
        ('<Link href="#" />', "Link"),
        ('<Link href="#" />', ["Anchor", "Link"]),
    ],
)
def test_hash_href_invalid(source: str, options: object) -> None:
    diagnostics = _check("no-hash-href", source, options)
    assert [diagnostic.message for diagnostic in diagnostics] == [NO_HASH_HREF_MESSAGE]
    assert diagnostics[0].attribute in {"href", "HREF"}


def test_recommended_profile_runs_the_markup_checks() -> None:
    element = parse_jsx_element('<a href="#" accessKey="l" />')
    rules = [diagnostic.rule for diagnostic in RuleEngine.from_profile("recommended").check_element(element)]
    assert rules == ["no-hash-href", "no-access-key"]
