"""
Bracket matching for the clausal parser.

Pairs opening and closing delimiters in bracketed parse text into spans,
ordered so that an enclosing span always precedes the spans it contains.
"""

import logging
from typing import List, Optional

from ..core import DEFAULT_SETTINGS, MalformedInputError, ParseSettings
from ..sentence import Span

logger = logging.getLogger(__name__)


class BracketMatcher:
    """Stack-based scanner that pairs bracket delimiters into spans."""

    def __init__(self, settings: Optional[ParseSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS

    def get_matches(self, text: str) -> List[Span]:
        """
        Pair every opening delimiter in text with its closing delimiter.

        Args:
            text: Bracketed parse text

        Returns:
            Spans sorted by ascending opening offset, ties by descending
            closing offset

        Raises:
            MalformedInputError: If a delimiter has no partner
        """
        bracket_open = self.settings.bracket_open
        bracket_close = self.settings.bracket_close
        stack: List[int] = []
        spans: List[Span] = []

        for i, char in enumerate(text):
            if char == bracket_open:
                stack.append(i)
            elif char == bracket_close:
                if not stack:
                    raise MalformedInputError(
                        f"Unbalanced closing delimiter {bracket_close!r}", i
                    )
                spans.append(Span(opening=stack.pop(), closing=i))

        if stack:
            raise MalformedInputError(
                f"Unmatched opening delimiter {bracket_open!r}", stack[-1]
            )

        spans.sort(key=lambda s: (s.opening, -s.closing))
        logger.debug("Matched %s bracket pairs", len(spans))
        return spans
