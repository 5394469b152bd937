from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from a11ylint.diagnostics.catalog import RULE_CATALOG
from a11ylint.errors import InternalInvariantError

from .access_key import NoAccessKeyRule
from .alt_text import AltTextRule
from .aria_props import AriaPropsRule
from .aria_role import AriaRoleRule
from .base import Rule
from .hash_href import NoHashHrefRule
from .noninteractive_interactions import NoNoninteractiveElementInteractionsRule
from .proptypes import AriaProptypesRule
from .redundant_alt import RedundantAltRule
from .redundant_roles import NoRedundantRolesRule
from .required_props import RoleHasRequiredAriaPropsRule
from .tabindex import TabindexNoPositiveRule
from .unsupported_elements import NoUnsupportedElementsUseAriaRule


def _build_rule_table(rules: tuple[Rule, ...]) -> Mapping[str, Rule]:
    table: dict[str, Rule] = {}
    for rule in rules:
        if rule.name in table:
            raise InternalInvariantError("E_RULE_DUPLICATE", f"duplicate rule name: {rule.name}")
        entry = RULE_CATALOG.get(rule.name)
        if entry is None or entry.kind is not rule.kind:
            raise InternalInvariantError(
                "E_RULE_CATALOG_MISMATCH", f"rule '{rule.name}' has no matching catalog entry"
            )
        table[rule.name] = rule
    missing = sorted(set(RULE_CATALOG) - set(table))
    if missing:
        raise InternalInvariantError(
            "E_RULE_CATALOG_MISMATCH", f"catalog names rules without an implementation: {missing}"
        )
    return MappingProxyType(table)


BUILTIN_RULES: Mapping[str, Rule] = _build_rule_table(
    (
        AltTextRule(),
        NoNoninteractiveElementInteractionsRule(),
        RoleHasRequiredAriaPropsRule(),
        AriaProptypesRule(),
        NoRedundantRolesRule(),
        TabindexNoPositiveRule(),
        AriaRoleRule(),
        AriaPropsRule(),
        NoUnsupportedElementsUseAriaRule(),
        NoAccessKeyRule(),
        RedundantAltRule(),
        NoHashHrefRule(),
    )
)


def rule_names() -> tuple[str, ...]:
    return tuple(BUILTIN_RULES)


def get_rule(name: str) -> Rule | None:
    return BUILTIN_RULES.get(name)
