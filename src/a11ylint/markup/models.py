from __future__ import annotations

from dataclasses import dataclass
from typing import Final

type LiteralScalar = str | int | float | bool | None

UNARY_OPERATORS: Final[frozenset[str]] = frozenset(("!", "-", "+", "~"))


@dataclass(frozen=True, slots=True)
class LiteralValue:
    value: LiteralScalar


@dataclass(frozen=True, slots=True)
class TemplateValue:
    quasis: tuple[str, ...]
    expressions: tuple[AttributeValue, ...] = ()

    def __post_init__(self) -> None:
        if len(self.quasis) != len(self.expressions) + 1:
            raise ValueError("template quasis must outnumber substitutions by exactly one")


@dataclass(frozen=True, slots=True)
class UnaryValue:
    operator: str
    operand: AttributeValue

    def __post_init__(self) -> None:
        if self.operator not in UNARY_OPERATORS:
            raise ValueError(f"unsupported unary operator: {self.operator!r}")


@dataclass(frozen=True, slots=True)
class ExpressionValue:
    source: str


type AttributeValue = LiteralValue | TemplateValue | UnaryValue | ExpressionValue


@dataclass(frozen=True, slots=True)
class SourceLocation:
    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("source line must be >= 1")
        if self.column < 0:
            raise ValueError("source column must be >= 0")


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute node; ``value`` is ``None`` for a bare (presence-only) attribute."""

    name: str
    value: AttributeValue | None = None
    location: SourceLocation | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("attribute name must be non-empty")


@dataclass(frozen=True, slots=True)
class MarkupElement:
    tag: str
    attributes: tuple[Attribute, ...] = ()
    location: SourceLocation | None = None

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("element tag must be non-empty")
        object.__setattr__(self, "attributes", tuple(self.attributes))
