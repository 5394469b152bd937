from __future__ import annotations

from dataclasses import dataclass

ROOT_ROLE = "roletype"
WIDGET_ROLE = "widget"
# toolbar does not descend from widget but manages focus like one
INTERACTIVE_ROLE_OVERRIDES: frozenset[str] = frozenset(("toolbar",))
PRESENTATIONAL_ROLES: frozenset[str] = frozenset(("presentation", "none"))


@dataclass(frozen=True, slots=True)
class RoleSpec:
    name: str
    superclasses: tuple[str, ...]
    required_props: tuple[str, ...] = ()
    abstract: bool = False


def _abstract(name: str, *superclasses: str) -> RoleSpec:
    return RoleSpec(name=name, superclasses=superclasses, abstract=True)


def _role(name: str, *superclasses: str, required: tuple[str, ...] = ()) -> RoleSpec:
    return RoleSpec(name=name, superclasses=superclasses, required_props=required)


_VALUE_RANGE_PROPS = ("aria-valuemax", "aria-valuemin", "aria-valuenow")

ROLE_SPECS: tuple[RoleSpec, ...] = (
    # abstract roles
    _abstract("roletype"),
    _abstract("structure", "roletype"),
    _abstract("widget", "roletype"),
    _abstract("window", "roletype"),
    _abstract("command", "widget"),
    _abstract("composite", "widget"),
    _abstract("input", "widget"),
    _abstract("range", "widget"),
    _abstract("section", "structure"),
    _abstract("sectionhead", "structure"),
    _abstract("landmark", "section"),
    _abstract("select", "composite", "group"),
    # document structure
    _role("application", "structure"),
    _role("document", "structure"),
    _role("article", "document"),
    _role("cell", "section"),
    _role("definition", "section"),
    _role("figure", "section"),
    _role("group", "section"),
    _role("heading", "sectionhead"),
    _role("img", "section"),
    _role("list", "section"),
    _role("directory", "list"),
    _role("feed", "list"),
    _role("listitem", "section"),
    _role("marquee", "section"),
    _role("math", "section"),
    _role("none", "structure"),
    _role("note", "section"),
    _role("presentation", "structure"),
    _role("region", "landmark"),
    _role("rowgroup", "structure"),
    _role("separator", "structure"),
    _role("table", "section"),
    _role("tabpanel", "section"),
    _role("term", "section"),
    _role("toolbar", "group"),
    _role("tooltip", "section"),
    # landmarks
    _role("banner", "landmark"),
    _role("complementary", "landmark"),
    _role("contentinfo", "landmark"),
    _role("form", "landmark"),
    _role("main", "landmark"),
    _role("navigation", "landmark"),
    _role("search", "landmark"),
    # live regions and windows
    _role("alert", "region"),
    _role("log", "region"),
    _role("status", "region"),
    _role("timer", "status"),
    _role("dialog", "window"),
    _role("alertdialog", "alert", "dialog"),
    # widgets
    _role("button", "command"),
    _role("link", "command"),
    _role("menuitem", "command"),
    _role("checkbox", "input", required=("aria-checked",)),
    _role("switch", "checkbox", required=("aria-checked",)),
    _role("radio", "input", required=("aria-checked",)),
    _role("menuitemcheckbox", "checkbox", "menuitem", required=("aria-checked",)),
    _role("menuitemradio", "menuitemcheckbox", "radio", required=("aria-checked",)),
    _role("option", "input"),
    _role("textbox", "input"),
    _role("searchbox", "textbox"),
    _role("slider", "input", "range", required=_VALUE_RANGE_PROPS),
    _role("spinbutton", "composite", "input", "range", required=_VALUE_RANGE_PROPS),
    _role("progressbar", "range"),
    _role(
        "scrollbar",
        "range",
        required=("aria-controls", "aria-orientation", *_VALUE_RANGE_PROPS),
    ),
    _role("gridcell", "cell", "widget"),
    _role("columnheader", "cell", "gridcell", "sectionhead"),
    _role("rowheader", "cell", "gridcell", "sectionhead"),
    _role("row", "group", "widget"),
    _role("tab", "sectionhead", "widget"),
    _role("combobox", "select", required=("aria-expanded",)),
    _role("grid", "composite", "table"),
    _role("listbox", "select"),
    _role("menu", "select"),
    _role("menubar", "menu"),
    _role("radiogroup", "select"),
    _role("tablist", "composite"),
    _role("tree", "select"),
    _role("treegrid", "grid", "tree"),
    _role("treeitem", "listitem", "option"),
)
