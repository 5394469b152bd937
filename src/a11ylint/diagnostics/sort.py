from __future__ import annotations

from collections.abc import Iterable

from .models import Diagnostic, Severity

_SEVERITY_RANK: dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
}


def _location_sort_key(diagnostic: Diagnostic) -> tuple[int, int, int]:
    if diagnostic.line is None or diagnostic.column is None:
        return (1, 0, 0)
    return (0, diagnostic.line, diagnostic.column)


def diagnostic_sort_key(
    diagnostic: Diagnostic,
) -> tuple[tuple[int, int, int], str, str, int, str]:
    return (
        _location_sort_key(diagnostic),
        diagnostic.rule,
        diagnostic.message,
        _SEVERITY_RANK[diagnostic.severity],
        diagnostic.attribute or "",
    )


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(diagnostics, key=diagnostic_sort_key)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(diagnostic.severity is Severity.ERROR for diagnostic in diagnostics)
