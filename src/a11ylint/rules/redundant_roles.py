from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.roles.element_roles import normalize_tag

from .base import Finding, NonEmptyName, Rule, RuleContext, UniqueNames


def redundant_role_message(tag: str, role: str) -> str:
    return (
        f"The element {tag} has an implicit role of {role}. "
        "Defining this explicitly is redundant and should be avoided."
    )


type RedundantRoleIgnores = Mapping[str, tuple[str, ...]]

_IGNORES_SCHEMA: TypeAdapter[Any] = TypeAdapter(dict[NonEmptyName, UniqueNames] | None)


def _normalize_ignores(raw: Mapping[str, tuple[str, ...]]) -> RedundantRoleIgnores:
    return MappingProxyType(
        {normalize_tag(tag): tuple(role.lower() for role in roles) for tag, roles in raw.items()}
    )


class NoRedundantRolesRule(Rule):
    """Explicit roles matching the element's implicit role are redundant.

    Options map a tag to the explicit roles tolerated on it.
    """

    name: ClassVar[str] = "no-redundant-roles"
    kind: ClassVar[DiagnosticKind] = DiagnosticKind.ELEMENT
    options_schema: ClassVar[TypeAdapter[Any]] = _IGNORES_SCHEMA
    default_options: ClassVar[Any] = {}

    def validate_options(self, raw: object) -> RedundantRoleIgnores:
        return _normalize_ignores(super().validate_options(raw))

    def check_element(self, context: RuleContext) -> Finding | None:
        semantics = context.semantics
        if not semantics.is_dom:
            return None
        explicit = self._first_concrete_role(context)
        if explicit is None or explicit != self._implicit_role(context):
            return None
        ignored: RedundantRoleIgnores = context.options
        if explicit in ignored.get(normalize_tag(context.element.tag), ()):
            return None
        return Finding(redundant_role_message(context.element.tag, explicit))

    def _implicit_role(self, context: RuleContext) -> str | None:
        # the role attribute itself never decides the implicit role it is compared with
        element = context.element
        attributes = tuple(
            attribute for attribute in element.attributes if attribute.name.lower() != "role"
        )
        return context.registry.get_implicit_role(element.tag, attributes)

    def _first_concrete_role(self, context: RuleContext) -> str | None:
        for token in context.semantics.explicit_roles:
            definition = context.registry.get_role_metadata(token)
            if definition is not None and not definition.abstract:
                return definition.name
        return None
