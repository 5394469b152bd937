from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class ConfigErrorCode(StrEnum):
    E_CONFIG_RULE_UNKNOWN = "E_CONFIG_RULE_UNKNOWN"
    E_CONFIG_OPTIONS_INVALID = "E_CONFIG_OPTIONS_INVALID"
    E_CONFIG_SEVERITY_INVALID = "E_CONFIG_SEVERITY_INVALID"
    E_CONFIG_PROFILE_UNKNOWN = "E_CONFIG_PROFILE_UNKNOWN"
    E_CONFIG_PROFILE_INVALID = "E_CONFIG_PROFILE_INVALID"


@dataclass(frozen=True, slots=True)
class ConfigurationErrorDetail:
    code: str
    message: str
    rule: str | None = None
    witness: Mapping[str, object] | None = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("configuration error code must be non-empty")
        if not self.message:
            raise ValueError("configuration error message must be non-empty")
        if self.witness is not None:
            canonical_witness = {key: self.witness[key] for key in sorted(self.witness)}
            object.__setattr__(self, "witness", MappingProxyType(canonical_witness))


class ConfigurationError(ValueError):
    """Raised while a rule set is being set up, never during traversal."""

    def __init__(self, detail: ConfigurationErrorDetail) -> None:
        super().__init__(f"{detail.code}: {detail.message}")
        self.detail = detail


class InternalInvariantError(RuntimeError):
    """A built-in semantic table is inconsistent; this is a packaging defect."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


def build_configuration_error(
    code: ConfigErrorCode,
    message: str,
    *,
    rule: str | None = None,
    witness: Mapping[str, object] | None = None,
) -> ConfigurationError:
    return ConfigurationError(
        ConfigurationErrorDetail(
            code=code.value,
            message=message,
            rule=rule,
            witness=witness,
        )
    )
