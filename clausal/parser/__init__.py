"""
clausal parser package - turns bracketed parse text into a Sentence.

- brackets: Bracket matching into ordered spans
- tags: Clause and phrase tag categories
- decomposer: Clause, phrase and word extraction
"""

from .brackets import BracketMatcher
from .decomposer import TreeDecomposer, phrases_by_length
from .tags import (
    ClauseTag,
    PhraseTag,
    TagKind,
    classify_tag,
    is_clause_tag,
    is_phrase_tag,
)

__all__ = [
    "BracketMatcher",
    "TreeDecomposer",
    "phrases_by_length",
    "ClauseTag",
    "PhraseTag",
    "TagKind",
    "classify_tag",
    "is_clause_tag",
    "is_phrase_tag",
]
