from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class DiagnosticKind(StrEnum):
    ELEMENT = "element"
    ATTRIBUTE = "attribute"


class Diagnostic(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    rule: str = Field(min_length=1)
    severity: Severity
    kind: DiagnosticKind
    message: str = Field(min_length=1)
    tag: str = Field(min_length=1)
    attribute: str | None = None

    line: int | None = Field(default=None, ge=1)
    column: int | None = Field(default=None, ge=0)

    # host node the finding is attached to; never serialized
    node: object | None = Field(default=None, exclude=True, repr=False)

    @model_validator(mode="after")
    def _validate_kind_context(self) -> Diagnostic:
        if self.kind is DiagnosticKind.ATTRIBUTE and not self.attribute:
            raise ValueError("attribute diagnostics must name the attribute")
        if (self.line is None) != (self.column is None):
            raise ValueError("line and column must be provided together")
        return self
