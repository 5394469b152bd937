from __future__ import annotations

from dataclasses import dataclass

type ConstraintValue = str | bool


@dataclass(frozen=True, slots=True)
class AttributeConstraint:
    name: str
    value: ConstraintValue

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("constraint attribute name must be non-empty")
        if isinstance(self.value, bool) and not self.value:
            raise ValueError("boolean constraints may only require presence (True)")


@dataclass(frozen=True, slots=True)
class ElementRoleEntry:
    tag: str
    roles: tuple[str, ...]
    constraints: tuple[AttributeConstraint, ...] = ()

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("element role entry tag must be non-empty")
        if not self.roles:
            raise ValueError(f"element role entry '{self.tag}' must name at least one role")

    @property
    def specificity(self) -> int:
        return len(self.constraints)


def _entry(tag: str, *roles: str, **constraints: ConstraintValue) -> ElementRoleEntry:
    return ElementRoleEntry(
        tag=tag,
        roles=roles,
        constraints=tuple(
            AttributeConstraint(name=name, value=value) for name, value in constraints.items()
        ),
    )


def _input(input_type: str, role: str) -> ElementRoleEntry:
    return _entry("input", role, type=input_type)


ELEMENT_ROLE_ENTRIES: tuple[ElementRoleEntry, ...] = (
    _entry("a", "link", href=True),
    _entry("area", "link", href=True),
    _entry("link", "link", href=True),
    _entry("article", "article"),
    _entry("body", "document"),
    _entry("button", "button"),
    _entry("datalist", "listbox"),
    _entry("dd", "definition"),
    _entry("details", "group"),
    _entry("dfn", "term"),
    _entry("dialog", "dialog"),
    _entry("dt", "term"),
    _entry("fieldset", "group"),
    _entry("figure", "figure"),
    _entry("footer", "contentinfo"),
    _entry("form", "form"),
    _entry("h1", "heading"),
    _entry("h2", "heading"),
    _entry("h3", "heading"),
    _entry("h4", "heading"),
    _entry("h5", "heading"),
    _entry("h6", "heading"),
    _entry("hr", "separator"),
    _entry("img", "img"),
    _entry("img", "presentation", alt=""),
    _entry("input", "textbox"),
    _input("button", "button"),
    _input("checkbox", "checkbox"),
    _input("email", "textbox"),
    _input("image", "button"),
    _input("number", "spinbutton"),
    _input("radio", "radio"),
    _input("range", "slider"),
    _input("reset", "button"),
    _input("search", "searchbox"),
    _input("submit", "button"),
    _input("tel", "textbox"),
    _input("text", "textbox"),
    _input("url", "textbox"),
    _entry("li", "listitem"),
    _entry("main", "main"),
    _entry("math", "math"),
    _entry("menu", "list"),
    _entry("menu", "toolbar", type="toolbar"),
    _entry("menuitem", "menuitem"),
    _entry("nav", "navigation"),
    _entry("ol", "list"),
    _entry("option", "option"),
    _entry("progress", "progressbar"),
    _entry("section", "region"),
    _entry("select", "combobox", "listbox"),
    _entry("select", "listbox", multiple=True),
    _entry("table", "table"),
    _entry("tbody", "rowgroup"),
    _entry("td", "cell"),
    _entry("td", "gridcell", role="gridcell"),
    _entry("textarea", "textbox"),
    _entry("tfoot", "rowgroup"),
    _entry("th", "columnheader"),
    _entry("thead", "rowgroup"),
    _entry("tr", "row"),
    _entry("ul", "list"),
)

DOM_TAGS: frozenset[str] = frozenset(
    """
    a abbr acronym address applet area article aside audio b base basefont bdi bdo
    bgsound big blink blockquote body br button canvas caption center cite code col
    colgroup command content data datalist dd del details dfn dialog dir div dl dt
    element em embed fieldset figcaption figure font footer form frame frameset h1
    h2 h3 h4 h5 h6 head header hgroup hr html i iframe image img input ins isindex
    kbd keygen label legend li link listing main map mark marquee math menu
    menuitem meta meter multicol nav nextid nobr noembed noframes noscript object
    ol optgroup option output p param picture plaintext pre progress q rb rp rt
    rtc ruby s samp script section select shadow slot small source spacer span
    strike strong style sub summary sup table tbody td template textarea tfoot th
    thead time title tr track tt u ul var video wbr xmp
    """.split()
)


def normalize_tag(tag: str) -> str:
    """Known HTML tag names fold to lower case; custom/component tags are kept verbatim."""
    lowered = tag.lower()
    if lowered in DOM_TAGS:
        return lowered
    return tag


def is_dom_tag(tag: str) -> bool:
    return tag.lower() in DOM_TAGS
