from .access_key import NO_ACCESS_KEY_MESSAGE, NoAccessKeyRule
from .alt_text import AltTextRule, alt_text_message
from .aria_props import AriaPropsRule, aria_props_message
from .aria_role import ARIA_ROLE_MESSAGE, AriaRoleOptions, AriaRoleRule
from .base import Finding, NoOptions, Rule, RuleContext, RuleOptions
from .handlers import EVENT_HANDLERS_BY_TYPE, INTERACTION_HANDLERS
from .hash_href import NO_HASH_HREF_MESSAGE, NoHashHrefRule
from .noninteractive_interactions import (
    NONINTERACTIVE_INTERACTIONS_MESSAGE,
    HandlerOptions,
    NoNoninteractiveElementInteractionsRule,
)
from .proptypes import AriaProptypesRule, proptypes_message
from .redundant_alt import REDUNDANT_ALT_MESSAGE, RedundantAltOptions, RedundantAltRule
from .redundant_roles import NoRedundantRolesRule, redundant_role_message
from .registry import BUILTIN_RULES, get_rule, rule_names
from .required_props import RoleHasRequiredAriaPropsRule, required_props_message
from .tabindex import TABINDEX_NO_POSITIVE_MESSAGE, TabindexNoPositiveRule
from .unsupported_elements import (
    RESERVED_TAGS,
    NoUnsupportedElementsUseAriaRule,
    unsupported_elements_message,
)

__all__ = [
    "ARIA_ROLE_MESSAGE",
    "AltTextRule",
    "AriaPropsRule",
    "AriaProptypesRule",
    "AriaRoleOptions",
    "AriaRoleRule",
    "BUILTIN_RULES",
    "EVENT_HANDLERS_BY_TYPE",
    "Finding",
    "HandlerOptions",
    "INTERACTION_HANDLERS",
    "NONINTERACTIVE_INTERACTIONS_MESSAGE",
    "NO_ACCESS_KEY_MESSAGE",
    "NO_HASH_HREF_MESSAGE",
    "NoAccessKeyRule",
    "NoHashHrefRule",
    "NoNoninteractiveElementInteractionsRule",
    "NoOptions",
    "NoRedundantRolesRule",
    "NoUnsupportedElementsUseAriaRule",
    "REDUNDANT_ALT_MESSAGE",
    "RESERVED_TAGS",
    "RedundantAltOptions",
    "RedundantAltRule",
    "RoleHasRequiredAriaPropsRule",
    "Rule",
    "RuleContext",
    "RuleOptions",
    "TABINDEX_NO_POSITIVE_MESSAGE",
    "TabindexNoPositiveRule",
    "alt_text_message",
    "aria_props_message",
    "get_rule",
    "proptypes_message",
    "redundant_role_message",
    "required_props_message",
    "rule_names",
    "unsupported_elements_message",
]
