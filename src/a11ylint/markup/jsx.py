from __future__ import annotations

import re
from typing import Final

from .models import (
    Attribute,
    AttributeValue,
    ExpressionValue,
    LiteralScalar,
    LiteralValue,
    MarkupElement,
    SourceLocation,
    TemplateValue,
    UnaryValue,
)

_TAG_NAME = re.compile(r"[A-Za-z][\w.:-]*")
_ATTR_NAME = re.compile(r"[A-Za-z_$][\w:$.-]*")
_NUMBER = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", flags=re.ASCII)
_KEYWORDS: Final[dict[str, LiteralScalar]] = {"true": True, "false": False, "null": None}
_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


class JsxScanError(ValueError):
    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


def parse_expression(source: str) -> AttributeValue:
    """Map the text of a ``{...}`` attribute container onto an attribute value node.

    Only literals, substitution-free templates and prefix unary operators are
    given structure; everything else is kept as an opaque expression.
    """
    text = source.strip()
    if not text:
        return ExpressionValue(source)
    if text in _KEYWORDS:
        return LiteralValue(_KEYWORDS[text])
    if _NUMBER.fullmatch(text):
        return LiteralValue(_number_value(text))
    if text[0] in "\"'":
        string_value = _whole_string_literal(text)
        if string_value is not None:
            return LiteralValue(string_value)
        return ExpressionValue(text)
    if text[0] == "`":
        template = _whole_template_literal(text)
        if template is not None:
            return template
        return ExpressionValue(text)
    if text[0] in "!-+~" and not text.startswith(("--", "++", "!=")):
        return UnaryValue(text[0], parse_expression(text[1:]))
    return ExpressionValue(text)


def scan_jsx_elements(text: str) -> tuple[MarkupElement, ...]:
    """Opening elements of JSX-like source, in source order.

    Closing tags, fragments and text are skipped. A ``<`` that does not start a
    well-formed opening tag is treated as ordinary text.
    """
    elements: list[MarkupElement] = []
    line_starts = _line_starts(text)
    index = 0
    while True:
        index = text.find("<", index)
        if index < 0:
            break
        try:
            element, end = _scan_opening_tag(text, index, line_starts)
        except JsxScanError:
            index += 1
            continue
        if element is None:
            index += 1
            continue
        elements.append(element)
        index = end
    return tuple(elements)


def parse_jsx_element(text: str) -> MarkupElement:
    """The first opening element of ``text``; raises ``JsxScanError`` when there is none."""
    elements = scan_jsx_elements(text)
    if not elements:
        raise JsxScanError("no opening element found", 0)
    return elements[0]


def _scan_opening_tag(
    text: str, start: int, line_starts: tuple[int, ...]
) -> tuple[MarkupElement | None, int]:
    name_match = _TAG_NAME.match(text, start + 1)
    if name_match is None:
        return None, start + 1
    tag = name_match.group(0)
    location = _location(line_starts, start)
    attributes: list[Attribute] = []
    index = name_match.end()
    while True:
        index = _skip_whitespace(text, index)
        if index >= len(text):
            raise JsxScanError("unterminated opening tag", start)
        if text.startswith("/>", index):
            index += 2
            break
        if text[index] == ">":
            index += 1
            break
        if text[index] == "{":
            # spread attributes carry no statically known name
            _, index = _read_braced(text, index)
            continue
        attr_match = _ATTR_NAME.match(text, index)
        if attr_match is None:
            raise JsxScanError("invalid attribute name", index)
        attr_location = _location(line_starts, index)
        index = _skip_whitespace(text, attr_match.end())
        value: AttributeValue | None = None
        if index < len(text) and text[index] == "=":
            value, index = _read_attribute_value(text, _skip_whitespace(text, index + 1))
        attributes.append(Attribute(name=attr_match.group(0), value=value, location=attr_location))
    return MarkupElement(tag=tag, attributes=tuple(attributes), location=location), index


def _read_attribute_value(text: str, index: int) -> tuple[AttributeValue, int]:
    if index >= len(text):
        raise JsxScanError("missing attribute value", index)
    quote = text[index]
    if quote in "\"'":
        end = text.find(quote, index + 1)
        if end < 0:
            raise JsxScanError("unterminated attribute string", index)
        # JSX attribute strings take no backslash escapes
        return LiteralValue(text[index + 1 : end]), end + 1
    if quote == "{":
        inner, end = _read_braced(text, index)
        return parse_expression(inner), end
    raise JsxScanError("unsupported attribute value", index)


def _read_braced(text: str, start: int) -> tuple[str, int]:
    depth = 0
    index = start
    while index < len(text):
        char = text[index]
        if char in "\"'`":
            index = _skip_string(text, index)
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start + 1 : index], index + 1
        index += 1
    raise JsxScanError("unbalanced braces", start)


def _skip_string(text: str, start: int) -> int:
    quote = text[start]
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return index + 1
        if quote == "`" and text.startswith("${", index):
            _, index = _read_braced(text, index + 1)
            continue
        index += 1
    raise JsxScanError("unterminated string", start)


def _whole_string_literal(text: str) -> str | None:
    quote = text[0]
    chars: list[str] = []
    index = 1
    while index < len(text):
        char = text[index]
        if char == "\\" and index + 1 < len(text):
            escaped = text[index + 1]
            chars.append(_ESCAPES.get(escaped, escaped))
            index += 2
            continue
        if char == quote:
            return "".join(chars) if index == len(text) - 1 else None
        chars.append(char)
        index += 1
    return None


def _whole_template_literal(text: str) -> TemplateValue | None:
    quasis: list[str] = []
    expressions: list[AttributeValue] = []
    chunk: list[str] = []
    index = 1
    while index < len(text):
        char = text[index]
        if char == "\\" and index + 1 < len(text):
            escaped = text[index + 1]
            chunk.append(_ESCAPES.get(escaped, escaped))
            index += 2
            continue
        if text.startswith("${", index):
            try:
                inner, index = _read_braced(text, index + 1)
            except JsxScanError:
                return None
            quasis.append("".join(chunk))
            chunk = []
            expressions.append(parse_expression(inner))
            continue
        if char == "`":
            if index != len(text) - 1:
                return None
            quasis.append("".join(chunk))
            return TemplateValue(quasis=tuple(quasis), expressions=tuple(expressions))
        chunk.append(char)
        index += 1
    return None


def _number_value(text: str) -> int | float:
    if any(marker in text for marker in ".eE"):
        return float(text)
    return int(text, 10)


def _skip_whitespace(text: str, index: int) -> int:
    while index < len(text) and text[index].isspace():
        index += 1
    return index


def _line_starts(text: str) -> tuple[int, ...]:
    starts = [0]
    starts.extend(match.end() for match in re.finditer(r"\n", text))
    return tuple(starts)


def _location(line_starts: tuple[int, ...], offset: int) -> SourceLocation:
    low, high = 0, len(line_starts) - 1
    while low < high:
        middle = (low + high + 1) // 2
        if line_starts[middle] <= offset:
            low = middle
        else:
            high = middle - 1
    return SourceLocation(line=low + 1, column=offset - line_starts[low])
