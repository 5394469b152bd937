from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cache
from importlib.resources import files
from types import MappingProxyType

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from a11ylint.errors import ConfigErrorCode, build_configuration_error

from .options import Profile, ProfileDocument

logger = logging.getLogger(__name__)

PROFILE_RESOURCE = "profiles.yaml"


def parse_profiles(payload_text: str, *, source: str = PROFILE_RESOURCE) -> Mapping[str, Profile]:
    try:
        payload = yaml.safe_load(payload_text)
    except yaml.YAMLError as exc:
        raise build_configuration_error(
            ConfigErrorCode.E_CONFIG_PROFILE_INVALID,
            f"invalid YAML payload: {source}: {exc}",
            witness={"source": source},
        ) from exc
    if not isinstance(payload, dict):
        raise build_configuration_error(
            ConfigErrorCode.E_CONFIG_PROFILE_INVALID,
            f"profile document must be a mapping: {source}",
            witness={"source": source},
        )
    try:
        document = ProfileDocument.model_validate(payload)
    except ValidationError as exc:
        raise build_configuration_error(
            ConfigErrorCode.E_CONFIG_PROFILE_INVALID,
            f"profile document failed validation: {source}",
            witness={"source": source, "errors": _error_locations(exc)},
        ) from exc
    logger.debug("loaded %d profiles from %s", len(document.profiles), source)
    return MappingProxyType(dict(document.profiles))


@cache
def bundled_profiles() -> Mapping[str, Profile]:
    payload_text = files("a11ylint.engine").joinpath(PROFILE_RESOURCE).read_text(encoding="utf-8")
    return parse_profiles(payload_text)


def profile_names() -> tuple[str, ...]:
    return tuple(bundled_profiles())


def get_profile(name: str, profiles: Mapping[str, Profile] | None = None) -> Profile:
    available = bundled_profiles() if profiles is None else profiles
    profile = available.get(name)
    if profile is None:
        raise build_configuration_error(
            ConfigErrorCode.E_CONFIG_PROFILE_UNKNOWN,
            f"unknown profile '{name}'",
            witness={"profile": name, "available": sorted(available)},
        )
    return profile


def _error_locations(exc: ValidationError) -> list[str]:
    return [
        ".".join(str(part) for part in error["loc"]) + f": {error['msg']}"
        for error in exc.errors()
    ]
