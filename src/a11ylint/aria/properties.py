from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from a11ylint.errors import InternalInvariantError


class AriaPropertyType(StrEnum):
    BOOLEAN = "boolean"
    STRING = "string"
    TRISTATE = "tristate"
    INTEGER = "integer"
    NUMBER = "number"
    TOKEN = "token"
    TOKENLIST = "tokenlist"


_TOKEN_KINDS = frozenset((AriaPropertyType.TOKEN, AriaPropertyType.TOKENLIST))


@dataclass(frozen=True, slots=True)
class AriaProperty:
    name: str
    value_type: AriaPropertyType
    allowed_values: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not self.name.startswith("aria-"):
            raise InternalInvariantError(
                "E_TABLE_ARIA_NAME_INVALID", f"ARIA property must start with 'aria-': {self.name}"
            )
        if (self.value_type in _TOKEN_KINDS) != bool(self.allowed_values):
            raise InternalInvariantError(
                "E_TABLE_ARIA_TOKENS_INVALID",
                f"property '{self.name}' allowed values do not match its {self.value_type} type",
            )


def _prop(name: str, value_type: AriaPropertyType, *allowed: str) -> AriaProperty:
    return AriaProperty(
        name=name,
        value_type=value_type,
        allowed_values=frozenset(token.lower() for token in allowed),
    )


_B = AriaPropertyType.BOOLEAN
_S = AriaPropertyType.STRING
_T3 = AriaPropertyType.TRISTATE
_I = AriaPropertyType.INTEGER
_N = AriaPropertyType.NUMBER
_TK = AriaPropertyType.TOKEN
_TL = AriaPropertyType.TOKENLIST

# id and idlist references are plain strings here
ARIA_PROPERTIES: tuple[AriaProperty, ...] = (
    _prop("aria-activedescendant", _S),
    _prop("aria-atomic", _B),
    _prop("aria-autocomplete", _TK, "inline", "list", "both", "none"),
    _prop("aria-busy", _B),
    _prop("aria-checked", _T3),
    _prop("aria-colcount", _I),
    _prop("aria-colindex", _I),
    _prop("aria-colspan", _I),
    _prop("aria-controls", _S),
    _prop("aria-current", _TK, "page", "step", "location", "date", "time", "true", "false"),
    _prop("aria-describedby", _S),
    _prop("aria-details", _S),
    _prop("aria-disabled", _B),
    _prop("aria-dropeffect", _TL, "copy", "move", "link", "execute", "popup", "none"),
    _prop("aria-errormessage", _S),
    _prop("aria-expanded", _B),
    _prop("aria-flowto", _S),
    _prop("aria-grabbed", _B),
    _prop("aria-haspopup", _TK, "false", "true", "menu", "listbox", "tree", "grid", "dialog"),
    _prop("aria-hidden", _B),
    _prop("aria-invalid", _TK, "grammar", "false", "spelling", "true"),
    _prop("aria-keyshortcuts", _S),
    _prop("aria-label", _S),
    _prop("aria-labelledby", _S),
    _prop("aria-level", _I),
    _prop("aria-live", _TK, "assertive", "off", "polite"),
    _prop("aria-modal", _B),
    _prop("aria-multiline", _B),
    _prop("aria-multiselectable", _B),
    _prop("aria-orientation", _TK, "vertical", "horizontal"),
    _prop("aria-owns", _S),
    _prop("aria-placeholder", _S),
    _prop("aria-posinset", _I),
    _prop("aria-pressed", _T3),
    _prop("aria-readonly", _B),
    _prop("aria-relevant", _TL, "additions", "removals", "text", "all"),
    _prop("aria-required", _B),
    _prop("aria-roledescription", _S),
    _prop("aria-rowcount", _I),
    _prop("aria-rowindex", _I),
    _prop("aria-rowspan", _I),
    _prop("aria-selected", _B),
    _prop("aria-setsize", _I),
    _prop("aria-sort", _TK, "ascending", "descending", "none", "other"),
    _prop("aria-valuemax", _N),
    _prop("aria-valuemin", _N),
    _prop("aria-valuenow", _N),
    _prop("aria-valuetext", _S),
)


def _build_property_table(
    properties: tuple[AriaProperty, ...],
) -> Mapping[str, AriaProperty]:
    table: dict[str, AriaProperty] = {}
    for prop in properties:
        key = prop.name.lower()
        if key in table:
            raise InternalInvariantError(
                "E_TABLE_ARIA_DUPLICATE", f"duplicate ARIA property: {prop.name}"
            )
        table[key] = prop
    return MappingProxyType(table)


ARIA_PROPERTY_TABLE: Mapping[str, AriaProperty] = _build_property_table(ARIA_PROPERTIES)


def get_property(name: str) -> AriaProperty | None:
    return ARIA_PROPERTY_TABLE.get(name.lower())


def is_aria_attribute_name(name: str) -> bool:
    return name.lower().startswith("aria-")


def property_names() -> tuple[str, ...]:
    return tuple(ARIA_PROPERTY_TABLE)
