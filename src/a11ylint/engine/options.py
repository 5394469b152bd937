from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from a11ylint.diagnostics.models import Severity


class RuleSetting(BaseModel):
    """One rule entry of a profile or an override set."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = True
    severity: Severity | None = None
    options: JsonValue = None


class Profile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str = Field(min_length=1)
    rules: dict[str, RuleSetting]


class ProfileDocument(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    version: int = Field(ge=1)
    profiles: dict[str, Profile] = Field(min_length=1)


def merge_setting(base: RuleSetting | None, override: RuleSetting) -> RuleSetting:
    """Fields explicitly set on ``override`` win over ``base``."""
    if base is None:
        return override
    updates = {name: getattr(override, name) for name in override.model_fields_set}
    return base.model_copy(update=updates)
