from .catalog import REQUIRED_CATALOG_FIELDS, RULE_CATALOG, RuleCatalogEntry
from .models import Diagnostic, DiagnosticKind, Severity
from .sort import diagnostic_sort_key, has_errors, sort_diagnostics

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "REQUIRED_CATALOG_FIELDS",
    "RULE_CATALOG",
    "RuleCatalogEntry",
    "Severity",
    "diagnostic_sort_key",
    "has_errors",
    "sort_diagnostics",
]
