from .element_roles import (
    DOM_TAGS,
    ELEMENT_ROLE_ENTRIES,
    AttributeConstraint,
    ElementRoleEntry,
    is_dom_tag,
    normalize_tag,
)
from .registry import DEFAULT_ROLE_REGISTRY, RoleDefinition, RoleRegistry
from .taxonomy import PRESENTATIONAL_ROLES, ROLE_SPECS, RoleSpec

__all__ = [
    "AttributeConstraint",
    "DEFAULT_ROLE_REGISTRY",
    "DOM_TAGS",
    "ELEMENT_ROLE_ENTRIES",
    "ElementRoleEntry",
    "PRESENTATIONAL_ROLES",
    "ROLE_SPECS",
    "RoleDefinition",
    "RoleRegistry",
    "RoleSpec",
    "is_dom_tag",
    "normalize_tag",
]
