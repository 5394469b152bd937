from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from a11ylint.markup.models import LiteralScalar
from a11ylint.markup.reader import AttributeRead, ReadKind

from .properties import AriaProperty, AriaPropertyType, get_property

_INTEGER_PATTERN = re.compile(r"[ \t\n\r\f\v]*[+-]?\d+[ \t\n\r\f\v]*", flags=re.ASCII)
_NUMBER_PATTERN = re.compile(
    r"[ \t\n\r\f\v]*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?[ \t\n\r\f\v]*",
    flags=re.ASCII,
)

type _Validator = Callable[[LiteralScalar, frozenset[str]], bool]


def _is_boolean(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    del allowed
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value.lower() in ("true", "false")


def _is_string(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    del allowed
    return isinstance(value, str) and value != ""


def _is_tristate(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    if _is_boolean(value, allowed):
        return True
    return isinstance(value, str) and value.lower() == "mixed"


def _is_integer(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    del allowed
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value) is not None


def _is_number(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    del allowed
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if not isinstance(value, str) or _NUMBER_PATTERN.fullmatch(value) is None:
        return False
    return math.isfinite(float(value))


def _is_token(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    if not isinstance(value, str):
        return False
    return value.lower() in allowed


def _is_tokenlist(value: LiteralScalar, allowed: frozenset[str]) -> bool:
    if not isinstance(value, str):
        return False
    tokens = value.lower().split()
    return bool(tokens) and all(token in allowed for token in tokens)


VALUE_VALIDATORS: Mapping[AriaPropertyType, _Validator] = MappingProxyType(
    {
        AriaPropertyType.BOOLEAN: _is_boolean,
        AriaPropertyType.STRING: _is_string,
        AriaPropertyType.TRISTATE: _is_tristate,
        AriaPropertyType.INTEGER: _is_integer,
        AriaPropertyType.NUMBER: _is_number,
        AriaPropertyType.TOKEN: _is_token,
        AriaPropertyType.TOKENLIST: _is_tokenlist,
    }
)


def validate_value(prop: AriaProperty, value: LiteralScalar) -> bool:
    return VALUE_VALIDATORS[prop.value_type](value, prop.allowed_values)


def validate(property_name: str, read: AttributeRead) -> bool:
    """Whether ``read`` is an acceptable value for ``property_name``.

    Unresolvable values and unknown property names always pass.
    """
    if read.kind is ReadKind.UNKNOWN:
        return True
    if read.kind is ReadKind.ABSENT:
        raise ValueError("absent attributes cannot be validated")
    prop = get_property(property_name)
    if prop is None:
        return True
    return validate_value(prop, read.value)


def describe_type(property_name: str) -> str | None:
    prop = get_property(property_name)
    if prop is None:
        return None
    return prop.value_type.value
