from __future__ import annotations

import pytest

from a11ylint.markup.models import (
    Attribute,
    ExpressionValue,
    LiteralValue,
    TemplateValue,
    UnaryValue,
)
from a11ylint.markup.reader import (
    ABSENT,
    UNKNOWN,
    AttributeRead,
    ReadKind,
    get_attribute,
    has_attribute,
    literal,
    read_attribute,
    read_attribute_value,
)

pytestmark = pytest.mark.unit


def test_bare_attribute_reads_as_literal_true() -> None:
    assert read_attribute_value(Attribute("aria-hidden")) == literal(True)


@pytest.mark.parametrize("value", ["button", 0, 1.5, True, False, None, ""])
def test_literal_values_read_as_is(value: object) -> None:
    read = read_attribute_value(Attribute("x", LiteralValue(value)))  # type: ignore[arg-type]
    assert read.kind is ReadKind.LITERAL
    assert read.value == value


def test_template_without_substitutions_concatenates_quasis() -> None:
    read = read_attribute_value(Attribute("role", TemplateValue(("button",))))
    assert read == literal("button")


def test_template_with_substitution_is_unknown() -> None:
    value = TemplateValue(("", "button"), (ExpressionValue("foo"),))
    assert read_attribute_value(Attribute("role", value)) is UNKNOWN


@pytest.mark.parametrize(
    ("operand", "expected"),
    [
        (LiteralValue(True), False),
        (LiteralValue(False), True),
        (LiteralValue("yes"), False),
        (LiteralValue(""), True),
        (LiteralValue(0), True),
        (LiteralValue(None), True),
    ],
)
def test_negation_of_literal_uses_truthiness(operand: LiteralValue, expected: bool) -> None:
    assert read_attribute_value(Attribute("x", UnaryValue("!", operand))) == literal(expected)


def test_double_negation_coerces_to_boolean() -> None:
    value = UnaryValue("!", UnaryValue("!", LiteralValue("yes")))
    assert read_attribute_value(Attribute("x", value)) == literal(True)


def test_negation_of_expression_is_unknown() -> None:
    value = UnaryValue("!", ExpressionValue("foo"))
    assert read_attribute_value(Attribute("x", value)) is UNKNOWN


@pytest.mark.parametrize(
    ("operator", "operand", "expected"),
    [
        ("-", 123, -123),
        ("+", 123, 123),
        ("~", 123, -124),
        ("-", 1.5, -1.5),
        ("~", 2.0, -3),
    ],
)
def test_numeric_prefix_operators_fold(operator: str, operand: int | float, expected: int | float) -> None:
    value = UnaryValue(operator, LiteralValue(operand))
    assert read_attribute_value(Attribute("x", value)) == literal(expected)


@pytest.mark.parametrize(
    ("operator", "operand"),
    [("-", "12"), ("+", True), ("~", 1.5), ("-", None)],
)
def test_numeric_prefix_on_non_numeric_literal_is_unknown(operator: str, operand: object) -> None:
    value = UnaryValue(operator, LiteralValue(operand))  # type: ignore[arg-type]
    assert read_attribute_value(Attribute("x", value)) is UNKNOWN


def test_expression_is_unknown() -> None:
    assert read_attribute_value(Attribute("role", ExpressionValue("role || 'button'"))) is UNKNOWN


def test_lookup_is_case_insensitive_and_returns_first_match() -> None:
    attributes = (
        Attribute("tabIndex", LiteralValue("0")),
        Attribute("tabindex", LiteralValue("1")),
    )
    found = get_attribute(attributes, "TABINDEX")
    assert found is attributes[0]
    assert has_attribute(attributes, "tabindex")
    assert read_attribute(attributes, "tabindex") == literal("0")


def test_missing_attribute_reads_absent() -> None:
    assert read_attribute((Attribute("role", LiteralValue("button")),), "href") is ABSENT
    assert not has_attribute((), "href")


def test_is_defined_excludes_absent_and_literal_null() -> None:
    assert not ABSENT.is_defined
    assert not literal(None).is_defined
    assert literal(False).is_defined
    assert UNKNOWN.is_defined


def test_non_literal_reads_cannot_carry_values() -> None:
    with pytest.raises(ValueError, match="cannot carry a value"):
        AttributeRead(ReadKind.UNKNOWN, "x")


def test_template_requires_one_more_quasi_than_substitutions() -> None:
    with pytest.raises(ValueError, match="quasis"):
        TemplateValue(("a", "b"))


def test_unary_rejects_unsupported_operator() -> None:
    with pytest.raises(ValueError, match="unsupported unary operator"):
        UnaryValue("typeof", LiteralValue(1))
