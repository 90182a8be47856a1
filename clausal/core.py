"""
Core settings and error types for clausal.

Contains the parse settings (bracket delimiters and root tag), the id counters
shared by every parse that uses the same settings, and the exception hierarchy
raised by the parser and the grammar layer.
"""

from dataclasses import dataclass, field

DEFAULT_BRACKET_OPEN = "["
DEFAULT_BRACKET_CLOSE = "]"
DEFAULT_TOP_TAG = "TOP"


class ClausalError(Exception):
    """Base class for all errors raised by clausal."""


class MalformedInputError(ClausalError, ValueError):
    """Raised when the bracketed input text has unbalanced delimiters."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class GrammarError(ClausalError):
    """Raised when a grammar store cannot supply the tables a parse needs."""


class IdTracker:
    """Monotonic id counters for sentences, clauses and phrases."""

    def __init__(self):
        self._sentence_id = 0
        self._clause_id = 0
        self._phrase_id = 0

    def next_sentence_id(self) -> int:
        value = self._sentence_id
        self._sentence_id += 1
        return value

    def next_clause_id(self) -> int:
        value = self._clause_id
        self._clause_id += 1
        return value

    def next_phrase_id(self) -> int:
        value = self._phrase_id
        self._phrase_id += 1
        return value


@dataclass(frozen=True)
class ParseSettings:
    """
    Settings that control how bracketed parse text is read.

    Args:
        bracket_open: Single character opening a constituent
        bracket_close: Single character closing a constituent
        top_tag: Tag of the root constituent, neither clause, phrase nor word
        ids: Id counters; parses sharing settings never reuse an id
    """

    bracket_open: str = DEFAULT_BRACKET_OPEN
    bracket_close: str = DEFAULT_BRACKET_CLOSE
    top_tag: str = DEFAULT_TOP_TAG
    ids: IdTracker = field(default_factory=IdTracker, compare=False, repr=False)

    def __post_init__(self):
        for name in ("bracket_open", "bracket_close"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if self.bracket_open == self.bracket_close:
            raise ValueError(
                f"Opening and closing delimiters must differ, got {self.bracket_open!r}"
            )
        if not self.top_tag:
            raise ValueError("top_tag must be a non-empty string")


# Process-wide settings used when a caller does not supply its own
DEFAULT_SETTINGS = ParseSettings()
