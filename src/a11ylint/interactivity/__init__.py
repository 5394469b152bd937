from .classifier import DEFAULT_CLASSIFIER, ElementSemantics, InteractivityClassifier, RoleVerdict
from .tables import (
    TAG_DECISIONS,
    AlwaysInteractive,
    AlwaysNonInteractive,
    AttributePredicate,
    ConditionalOnAttribute,
    DelegateToRole,
    Interactivity,
    PredicateKind,
    TagDecision,
)

__all__ = [
    "AlwaysInteractive",
    "AlwaysNonInteractive",
    "AttributePredicate",
    "ConditionalOnAttribute",
    "DEFAULT_CLASSIFIER",
    "DelegateToRole",
    "ElementSemantics",
    "Interactivity",
    "InteractivityClassifier",
    "PredicateKind",
    "RoleVerdict",
    "TAG_DECISIONS",
    "TagDecision",
]
