from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from .models import Attribute, LiteralValue, MarkupElement, SourceLocation

_TREE_BUILDER = "html.parser"


def parse_html_elements(text: str) -> tuple[MarkupElement, ...]:
    """Elements of an HTML document in document (pre-)order.

    Every attribute value in HTML is a literal string; an attribute written
    without ``=`` carries the empty string, as HTML defines it.
    """
    # keep class/rel and friends as the single strings written in the source
    soup = BeautifulSoup(text, _TREE_BUILDER, multi_valued_attributes=None)
    return tuple(_to_element(tag) for tag in soup.find_all(True))


def _to_element(tag: Tag) -> MarkupElement:
    location = _location(tag)
    attributes = tuple(
        Attribute(name=name, value=LiteralValue(str(value)), location=location)
        for name, value in tag.attrs.items()
        if name
    )
    return MarkupElement(tag=tag.name, attributes=attributes, location=location)


def _location(tag: Tag) -> SourceLocation | None:
    if tag.sourceline is None or tag.sourcepos is None:
        return None
    return SourceLocation(line=tag.sourceline, column=tag.sourcepos)
