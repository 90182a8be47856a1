"""
clausal resolver package - clause pattern classification.

- verbs: Heuristic verb subcategorization
- formatter: Per-clause aliased pattern strings
- matcher: Sequential subsequence distance
- clause_resolver: Rule matching with elided-subject fallback
"""

from .clause_resolver import ClauseResolver
from .formatter import PatternFormatter
from .matcher import distance_to_pattern, matches_pattern
from .verbs import VerbClassifier, VerbType, base_form, is_be_verb

__all__ = [
    "ClauseResolver",
    "PatternFormatter",
    "distance_to_pattern",
    "matches_pattern",
    "VerbClassifier",
    "VerbType",
    "base_form",
    "is_be_verb",
]
