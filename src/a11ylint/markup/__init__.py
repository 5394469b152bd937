from .html_host import parse_html_elements
from .jsx import JsxScanError, parse_expression, parse_jsx_element, scan_jsx_elements
from .models import (
    Attribute,
    AttributeValue,
    ExpressionValue,
    LiteralValue,
    MarkupElement,
    SourceLocation,
    TemplateValue,
    UnaryValue,
)
from .reader import (
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

__all__ = [
    "ABSENT",
    "Attribute",
    "AttributeRead",
    "AttributeValue",
    "ExpressionValue",
    "JsxScanError",
    "LiteralValue",
    "MarkupElement",
    "ReadKind",
    "SourceLocation",
    "TemplateValue",
    "UNKNOWN",
    "UnaryValue",
    "get_attribute",
    "has_attribute",
    "literal",
    "parse_expression",
    "parse_html_elements",
    "parse_jsx_element",
    "read_attribute",
    "read_attribute_value",
    "scan_jsx_elements",
]
