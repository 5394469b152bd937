from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import DiagnosticKind, Severity


@dataclass(frozen=True, slots=True)
class RuleCatalogEntry:
    rule: str
    kind: DiagnosticKind
    default_severity: Severity
    summary: str

    def __post_init__(self) -> None:
        if not self.rule:
            raise ValueError("rule catalog name must be non-empty")
        if not self.summary:
            raise ValueError(f"rule catalog entry '{self.rule}' summary must be non-empty")


def _entry(
    rule: str,
    kind: DiagnosticKind,
    summary: str,
    default_severity: Severity = Severity.ERROR,
) -> RuleCatalogEntry:
    return RuleCatalogEntry(
        rule=rule,
        kind=kind,
        default_severity=default_severity,
        summary=summary,
    )


def _build_catalog(
    entries: tuple[RuleCatalogEntry, ...],
) -> Mapping[str, RuleCatalogEntry]:
    catalog: dict[str, RuleCatalogEntry] = {}
    for entry in entries:
        if entry.rule in catalog:
            raise ValueError(f"duplicate rule catalog name: {entry.rule}")
        catalog[entry.rule] = entry
    return MappingProxyType(catalog)


_CATALOG_ENTRIES: tuple[RuleCatalogEntry, ...] = (
    _entry(
        "alt-text",
        DiagnosticKind.ELEMENT,
        "img elements and configured image components carry an alt attribute",
    ),
    _entry(
        "no-noninteractive-element-interactions",
        DiagnosticKind.ELEMENT,
        "non-interactive elements carry no mouse or keyboard handlers",
    ),
    _entry(
        "role-has-required-aria-props",
        DiagnosticKind.ATTRIBUTE,
        "explicit roles come with every ARIA property they require",
    ),
    _entry(
        "aria-proptypes",
        DiagnosticKind.ATTRIBUTE,
        "ARIA property values match the property's value type",
    ),
    _entry(
        "no-redundant-roles",
        DiagnosticKind.ELEMENT,
        "explicit roles differ from the element's implicit role",
    ),
    _entry(
        "tabindex-no-positive",
        DiagnosticKind.ATTRIBUTE,
        "tabIndex values are not positive",
        Severity.WARNING,
    ),
    _entry(
        "aria-role",
        DiagnosticKind.ATTRIBUTE,
        "role tokens name concrete ARIA roles",
    ),
    _entry(
        "aria-props",
        DiagnosticKind.ATTRIBUTE,
        "aria-* attribute names are defined ARIA properties",
    ),
    _entry(
        "no-unsupported-elements-use-aria",
        DiagnosticKind.ATTRIBUTE,
        "reserved elements such as meta and script carry no role or aria-* attributes",
    ),
    _entry(
        "no-access-key",
        DiagnosticKind.ATTRIBUTE,
        "elements carry no accessKey shortcut",
    ),
    _entry(
        "redundant-alt",
        DiagnosticKind.ELEMENT,
        "img alt text does not describe itself as an image, photo or picture",
    ),
    _entry(
        "no-hash-href",
        DiagnosticKind.ATTRIBUTE,
        'links do not point to a bare "#" fragment',
    ),
)


RULE_CATALOG: Mapping[str, RuleCatalogEntry] = _build_catalog(_CATALOG_ENTRIES)

REQUIRED_CATALOG_FIELDS: tuple[str, ...] = ("rule", "kind", "default_severity", "summary")
