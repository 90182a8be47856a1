"""
clausal - clause decomposition and argument pattern classification for
bracketed constituency parses.
"""

from clausal.analysis import analyze
from clausal.core import (
    ClausalError,
    GrammarError,
    MalformedInputError,
    ParseSettings,
)
from clausal.grammar_provider import (
    FileGrammarProvider,
    GrammarContext,
    GrammarProvider,
    SqliteGrammarProvider,
    StaticGrammarProvider,
)
from clausal.sentence import Sentence, Span, TaggedGroup, Word

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "ClausalError",
    "GrammarError",
    "MalformedInputError",
    "ParseSettings",
    "FileGrammarProvider",
    "GrammarContext",
    "GrammarProvider",
    "SqliteGrammarProvider",
    "StaticGrammarProvider",
    "Sentence",
    "Span",
    "TaggedGroup",
    "Word",
]
