from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from a11ylint.diagnostics.catalog import RULE_CATALOG
from a11ylint.diagnostics.models import Diagnostic, DiagnosticKind, Severity
from a11ylint.errors import ConfigErrorCode, build_configuration_error
from a11ylint.interactivity.classifier import DEFAULT_CLASSIFIER, InteractivityClassifier
from a11ylint.markup.models import MarkupElement
from a11ylint.rules.base import Finding, Rule, RuleContext
from a11ylint.rules.registry import BUILTIN_RULES

from .options import RuleSetting, merge_setting
from .profiles import get_profile

logger = logging.getLogger(__name__)

type RuleOverrides = Mapping[str, RuleSetting | Mapping[str, object]]


@dataclass(frozen=True, slots=True)
class ActiveRule:
    rule: Rule
    options: Any
    severity: Severity


class RuleEngine:
    """Runs the registered rules over a pre-order stream of elements.

    Every option set is validated at registration; a visit never raises a
    configuration error.
    """

    __slots__ = ("_active", "_available", "_classifier")

    def __init__(
        self,
        classifier: InteractivityClassifier = DEFAULT_CLASSIFIER,
        available_rules: Mapping[str, Rule] = BUILTIN_RULES,
    ) -> None:
        self._classifier = classifier
        self._available = available_rules
        self._active: dict[str, ActiveRule] = {}

    @classmethod
    def from_profile(
        cls,
        profile_name: str = "recommended",
        overrides: RuleOverrides | None = None,
        *,
        classifier: InteractivityClassifier = DEFAULT_CLASSIFIER,
    ) -> RuleEngine:
        profile = get_profile(profile_name)
        settings: dict[str, RuleSetting] = dict(profile.rules)
        for rule_name, raw_override in (overrides or {}).items():
            override = _coerce_setting(rule_name, raw_override)
            settings[rule_name] = merge_setting(settings.get(rule_name), override)

        engine = cls(classifier=classifier)
        for rule_name, setting in settings.items():
            if setting.enabled:
                engine.register(rule_name, options=setting.options, severity=setting.severity)
        logger.debug(
            "profile '%s' activated %d rules", profile_name, len(engine.active_rule_names)
        )
        return engine

    @property
    def active_rule_names(self) -> tuple[str, ...]:
        return tuple(self._active)

    def register(
        self,
        name: str,
        *,
        options: object = None,
        severity: Severity | str | None = None,
    ) -> None:
        rule = self._available.get(name)
        if rule is None:
            raise build_configuration_error(
                ConfigErrorCode.E_CONFIG_RULE_UNKNOWN,
                f"unknown rule '{name}'",
                rule=name,
                witness={"available": sorted(self._available)},
            )
        try:
            validated = rule.validate_options(options)
        except ValueError as exc:
            raise build_configuration_error(
                ConfigErrorCode.E_CONFIG_OPTIONS_INVALID,
                f"invalid options for rule '{name}': {_describe_error(exc)}",
                rule=name,
                witness={"options": options},
            ) from exc
        self._active[name] = ActiveRule(
            rule=rule,
            options=validated,
            severity=_resolve_severity(name, severity),
        )
        logger.debug("registered rule '%s'", name)

    def check_element(self, element: MarkupElement) -> list[Diagnostic]:
        """Diagnostics for one element: element hooks, then attribute hooks in order."""
        semantics = self._classifier.describe(element.tag, element.attributes)
        contexts = [
            (
                active,
                RuleContext(
                    element=element,
                    semantics=semantics,
                    options=active.options,
                    registry=self._classifier.registry,
                ),
            )
            for active in self._active.values()
        ]

        diagnostics: list[Diagnostic] = []
        for active, context in contexts:
            finding = active.rule.check_element(context)
            if finding is not None:
                diagnostics.append(_build_diagnostic(active, element, finding))
        for attribute in element.attributes:
            for active, context in contexts:
                finding = active.rule.check_attribute(context, attribute)
                if finding is not None:
                    diagnostics.append(_build_diagnostic(active, element, finding))
        return diagnostics

    def run(self, elements: Iterable[MarkupElement]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for element in elements:
            diagnostics.extend(self.check_element(element))
        return diagnostics


def _coerce_setting(rule_name: str, raw: RuleSetting | Mapping[str, object]) -> RuleSetting:
    if isinstance(raw, RuleSetting):
        return raw
    try:
        return RuleSetting.model_validate(raw)
    except ValidationError as exc:
        raise build_configuration_error(
            ConfigErrorCode.E_CONFIG_OPTIONS_INVALID,
            f"invalid override for rule '{rule_name}': {_describe_error(exc)}",
            rule=rule_name,
        ) from exc


def _resolve_severity(rule_name: str, severity: Severity | str | None) -> Severity:
    if severity is None:
        entry = RULE_CATALOG.get(rule_name)
        return Severity.ERROR if entry is None else entry.default_severity
    try:
        return Severity(severity)
    except ValueError as exc:
        raise build_configuration_error(
            ConfigErrorCode.E_CONFIG_SEVERITY_INVALID,
            f"invalid severity '{severity}' for rule '{rule_name}'",
            rule=rule_name,
            witness={"allowed": [member.value for member in Severity]},
        ) from exc


def _describe_error(exc: ValueError) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(error["msg"] for error in exc.errors())
    return str(exc)


def _build_diagnostic(active: ActiveRule, element: MarkupElement, finding: Finding) -> Diagnostic:
    attribute = finding.attribute
    location = element.location
    if attribute is not None and attribute.location is not None:
        location = attribute.location
    return Diagnostic(
        rule=active.rule.name,
        severity=active.severity,
        kind=DiagnosticKind.ELEMENT if attribute is None else DiagnosticKind.ATTRIBUTE,
        message=finding.message,
        tag=element.tag,
        attribute=None if attribute is None else attribute.name,
        line=None if location is None else location.line,
        column=None if location is None else location.column,
        node=element if attribute is None else attribute,
    )
