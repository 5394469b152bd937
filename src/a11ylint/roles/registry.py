from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from a11ylint.errors import InternalInvariantError
from a11ylint.markup.models import Attribute
from a11ylint.markup.reader import read_attribute

from .element_roles import ELEMENT_ROLE_ENTRIES, AttributeConstraint, ElementRoleEntry, normalize_tag
from .taxonomy import (
    INTERACTIVE_ROLE_OVERRIDES,
    ROLE_SPECS,
    ROOT_ROLE,
    WIDGET_ROLE,
    RoleSpec,
)


@dataclass(frozen=True, slots=True)
class RoleDefinition:
    name: str
    abstract: bool
    ancestors: frozenset[str]
    required_props: tuple[str, ...]
    interactive: bool

    @property
    def canonical_name(self) -> str:
        return self.name.upper()


class RoleRegistry:
    """Immutable role taxonomy and tag-to-implicit-role tables.

    Role ancestry is flattened once at construction so that interactivity is a
    set membership test.
    """

    __slots__ = ("_element_entries", "_roles")

    def __init__(
        self,
        role_specs: Sequence[RoleSpec] = ROLE_SPECS,
        element_entries: Sequence[ElementRoleEntry] = ELEMENT_ROLE_ENTRIES,
    ) -> None:
        self._roles = _build_role_table(role_specs)
        self._element_entries = _build_element_table(element_entries, self._roles)

    def role_names(self) -> tuple[str, ...]:
        return tuple(self._roles)

    def get_role_metadata(self, role_name: str) -> RoleDefinition | None:
        return self._roles.get(role_name.strip().lower())

    def is_abstract_role(self, role_name: str) -> bool:
        definition = self.get_role_metadata(role_name)
        return definition is not None and definition.abstract

    def is_interactive_role(self, role_name: str) -> bool:
        definition = self.get_role_metadata(role_name)
        return definition is not None and not definition.abstract and definition.interactive

    def has_implicit_role_mapping(self, tag: str) -> bool:
        return normalize_tag(tag) in self._element_entries

    def get_implicit_roles(self, tag: str, attributes: Sequence[Attribute]) -> tuple[str, ...]:
        entries = self._element_entries.get(normalize_tag(tag))
        if entries is None:
            return ()
        best: ElementRoleEntry | None = None
        for entry in entries:
            if best is not None and entry.specificity <= best.specificity:
                continue
            if _constraints_match(entry.constraints, attributes):
                best = entry
        if best is None:
            return ()
        return best.roles

    def get_implicit_role(self, tag: str, attributes: Sequence[Attribute]) -> str | None:
        roles = self.get_implicit_roles(tag, attributes)
        return roles[0] if roles else None


def _constraints_match(
    constraints: tuple[AttributeConstraint, ...], attributes: Sequence[Attribute]
) -> bool:
    for constraint in constraints:
        read = read_attribute(attributes, constraint.name)
        if not read.is_literal:
            return False
        if constraint.value is True:
            if read.value is None or read.value is False:
                return False
            continue
        if not isinstance(read.value, str):
            return False
        if read.value.lower() != str(constraint.value).lower():
            return False
    return True


def _build_role_table(role_specs: Sequence[RoleSpec]) -> Mapping[str, RoleDefinition]:
    specs: dict[str, RoleSpec] = {}
    for spec in role_specs:
        key = spec.name.lower()
        if key in specs:
            raise InternalInvariantError("E_TABLE_ROLE_DUPLICATE", f"duplicate role: {spec.name}")
        specs[key] = spec
    if ROOT_ROLE not in specs or WIDGET_ROLE not in specs:
        raise InternalInvariantError(
            "E_TABLE_ROLE_MISSING", f"role taxonomy must define '{ROOT_ROLE}' and '{WIDGET_ROLE}'"
        )

    closure: dict[str, frozenset[str]] = {}
    for key in specs:
        _ancestors_of(key, specs, closure, ())

    table: dict[str, RoleDefinition] = {}
    for key, spec in specs.items():
        ancestors = closure[key]
        if key != ROOT_ROLE and ROOT_ROLE not in ancestors:
            raise InternalInvariantError(
                "E_TABLE_ROLE_UNROOTED", f"role '{spec.name}' does not descend from '{ROOT_ROLE}'"
            )
        table[key] = RoleDefinition(
            name=key,
            abstract=spec.abstract,
            ancestors=ancestors,
            required_props=tuple(prop.lower() for prop in spec.required_props),
            interactive=WIDGET_ROLE in ancestors or key in INTERACTIVE_ROLE_OVERRIDES,
        )
    return MappingProxyType(table)


def _ancestors_of(
    key: str,
    specs: Mapping[str, RoleSpec],
    closure: dict[str, frozenset[str]],
    path: tuple[str, ...],
) -> frozenset[str]:
    cached = closure.get(key)
    if cached is not None:
        return cached
    if key in path:
        cycle = " -> ".join((*path, key))
        raise InternalInvariantError("E_TABLE_ROLE_CYCLE", f"role ancestry cycle: {cycle}")
    ancestors: set[str] = set()
    for parent in specs[key].superclasses:
        parent_key = parent.lower()
        if parent_key not in specs:
            raise InternalInvariantError(
                "E_TABLE_ROLE_UNKNOWN",
                f"role '{key}' names unknown superclass '{parent}'",
            )
        ancestors.add(parent_key)
        ancestors.update(_ancestors_of(parent_key, specs, closure, (*path, key)))
    result = frozenset(ancestors)
    closure[key] = result
    return result


def _build_element_table(
    entries: Sequence[ElementRoleEntry], roles: Mapping[str, RoleDefinition]
) -> Mapping[str, tuple[ElementRoleEntry, ...]]:
    grouped: dict[str, list[ElementRoleEntry]] = {}
    for entry in entries:
        for role in entry.roles:
            definition = roles.get(role.lower())
            if definition is None:
                raise InternalInvariantError(
                    "E_TABLE_ELEMENT_ROLE_UNKNOWN",
                    f"element '{entry.tag}' maps to unknown role '{role}'",
                )
            if definition.abstract:
                raise InternalInvariantError(
                    "E_TABLE_ELEMENT_ROLE_ABSTRACT",
                    f"element '{entry.tag}' maps to abstract role '{role}'",
                )
        grouped.setdefault(entry.tag.lower(), []).append(entry)
    return MappingProxyType({tag: tuple(group) for tag, group in grouped.items()})


DEFAULT_ROLE_REGISTRY = RoleRegistry()
