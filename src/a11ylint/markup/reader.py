from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .models import (
    Attribute,
    AttributeValue,
    ExpressionValue,
    LiteralScalar,
    LiteralValue,
    TemplateValue,
    UnaryValue,
)


class ReadKind(StrEnum):
    LITERAL = "literal"
    UNKNOWN = "unknown"
    ABSENT = "absent"


@dataclass(frozen=True, slots=True)
class AttributeRead:
    kind: ReadKind
    value: LiteralScalar = None

    def __post_init__(self) -> None:
        if self.kind is not ReadKind.LITERAL and self.value is not None:
            raise ValueError(f"{self.kind} reads cannot carry a value")

    @property
    def is_literal(self) -> bool:
        return self.kind is ReadKind.LITERAL

    @property
    def is_unknown(self) -> bool:
        return self.kind is ReadKind.UNKNOWN

    @property
    def is_absent(self) -> bool:
        return self.kind is ReadKind.ABSENT

    @property
    def is_defined(self) -> bool:
        """Present and not a literal ``null``/``undefined``; unknown values count as defined."""
        if self.kind is ReadKind.ABSENT:
            return False
        return not (self.kind is ReadKind.LITERAL and self.value is None)


UNKNOWN = AttributeRead(ReadKind.UNKNOWN)
ABSENT = AttributeRead(ReadKind.ABSENT)


def literal(value: LiteralScalar) -> AttributeRead:
    return AttributeRead(ReadKind.LITERAL, value)


def get_attribute(attributes: Sequence[Attribute], name: str) -> Attribute | None:
    """First attribute whose name matches ``name`` case-insensitively."""
    wanted = name.lower()
    for attribute in attributes:
        if attribute.name.lower() == wanted:
            return attribute
    return None


def has_attribute(attributes: Sequence[Attribute], name: str) -> bool:
    return get_attribute(attributes, name) is not None


def read_attribute(attributes: Sequence[Attribute], name: str) -> AttributeRead:
    attribute = get_attribute(attributes, name)
    if attribute is None:
        return ABSENT
    return read_attribute_value(attribute)


def read_attribute_value(attribute: Attribute) -> AttributeRead:
    if attribute.value is None:
        return literal(True)
    return _read_value(attribute.value)


def _read_value(value: AttributeValue) -> AttributeRead:
    if isinstance(value, LiteralValue):
        return literal(value.value)
    if isinstance(value, TemplateValue):
        if value.expressions:
            return UNKNOWN
        return literal("".join(value.quasis))
    if isinstance(value, UnaryValue):
        return _fold_unary(value)
    if isinstance(value, ExpressionValue):
        return UNKNOWN
    raise TypeError(f"unsupported attribute value node: {type(value).__name__}")


def _fold_unary(value: UnaryValue) -> AttributeRead:
    operand = _read_value(value.operand)
    if not operand.is_literal:
        return UNKNOWN
    if value.operator == "!":
        return literal(not operand.value)

    number = operand.value
    if isinstance(number, bool) or not isinstance(number, int | float):
        return UNKNOWN
    if value.operator == "-":
        return literal(-number)
    if value.operator == "+":
        return literal(number)
    if isinstance(number, float):
        if not number.is_integer():
            return UNKNOWN
        number = int(number)
    return literal(~number)
