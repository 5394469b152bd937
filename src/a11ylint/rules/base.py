from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter

from a11ylint.diagnostics.models import DiagnosticKind
from a11ylint.interactivity.classifier import ElementSemantics
from a11ylint.markup.models import Attribute, MarkupElement
from a11ylint.roles.registry import RoleRegistry


def _require_unique(values: tuple[str, ...]) -> tuple[str, ...]:
    if len(set(values)) != len(values):
        raise ValueError("entries must be unique")
    return values


NonEmptyName = Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
UniqueNames = Annotated[tuple[NonEmptyName, ...], AfterValidator(_require_unique)]
ComponentNames = Annotated[UniqueNames, Field(min_length=1)]


class RuleOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class NoOptions(RuleOptions):
    pass


@dataclass(frozen=True, slots=True)
class Finding:
    message: str
    attribute: Attribute | None = None

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("finding message must be non-empty")


@dataclass(frozen=True, slots=True)
class RuleContext:
    """Per-visit facts handed to every rule hook."""

    element: MarkupElement
    semantics: ElementSemantics
    options: Any
    registry: RoleRegistry


class Rule:
    """Stateless check bound to a name and an options schema.

    Hooks return at most one finding per invocation; the engine attaches
    severity and location.
    """

    name: ClassVar[str]
    kind: ClassVar[DiagnosticKind]
    options_schema: ClassVar[TypeAdapter[Any]] = TypeAdapter(NoOptions | None)
    default_options: ClassVar[Any] = None

    def validate_options(self, raw: object) -> Any:
        """Validated options for ``raw``; raises ``pydantic.ValidationError``."""
        options = self.options_schema.validate_python(raw)
        return self.default_options if options is None else options

    def check_element(self, context: RuleContext) -> Finding | None:
        del context
        return None

    def check_attribute(self, context: RuleContext, attribute: Attribute) -> Finding | None:
        del context, attribute
        return None
