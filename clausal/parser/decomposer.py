"""
Tree decomposition for the clausal parser.

Turns bracketed parse text into a Sentence holding three flat collections:
clauses, phrases (each linked to an enclosing clause by id) and leaf words.
"""

import logging
from typing import List, Optional, Tuple

from ..core import DEFAULT_SETTINGS, ParseSettings
from ..sentence import Sentence, Span, TaggedGroup, Word
from .brackets import BracketMatcher
from .tags import TagKind, classify_tag

logger = logging.getLogger(__name__)


class TreeDecomposer:
    """
    Decomposes a bracketed constituency parse into clauses, phrases and words.

    Clause and phrase ids come from the id counters of the settings, so two
    parses sharing settings never hand out the same id twice.
    """

    def __init__(self, settings: Optional[ParseSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.bracket_matcher = BracketMatcher(self.settings)

    @staticmethod
    def split_span(text: str, span: Span) -> Tuple[str, int]:
        """
        Split a span into its tag and the offset where its payload starts.

        The tag runs from after the opening delimiter up to the first space.
        A span without a space is all tag and has an empty payload.
        """
        inner = text[span.opening + 1 : span.closing]
        space = inner.find(" ")
        if space == -1:
            return inner, span.closing
        return inner[:space], span.opening + 1 + space + 1

    def mark_clauses(self, spans: List[Span], text: str) -> List[TaggedGroup]:
        clauses = []
        for span in spans:
            tag, _ = self.split_span(text, span)
            if classify_tag(tag, self.settings.top_tag) is TagKind.CLAUSE:
                clauses.append(
                    TaggedGroup(
                        opening=span.opening,
                        closing=span.closing,
                        id=self.settings.ids.next_clause_id(),
                        tag=tag,
                    )
                )
        return clauses

    def mark_phrases(self, spans: List[Span], text: str) -> List[TaggedGroup]:
        phrases = []
        for span in spans:
            tag, _ = self.split_span(text, span)
            if classify_tag(tag, self.settings.top_tag) is TagKind.PHRASE:
                phrases.append(
                    TaggedGroup(
                        opening=span.opening,
                        closing=span.closing,
                        id=self.settings.ids.next_phrase_id(),
                        tag=tag,
                    )
                )
        return phrases

    def mark_words(self, spans: List[Span], text: str) -> List[Word]:
        words = []
        for span in spans:
            tag, payload_start = self.split_span(text, span)
            if classify_tag(tag, self.settings.top_tag) is not TagKind.WORD:
                continue
            word = text[payload_start : span.closing]
            words.append(
                Word(
                    index=payload_start,
                    index_end=payload_start + len(word),
                    tag=tag,
                    text=word,
                )
            )
        return words

    @staticmethod
    def assign_groups(clauses: List[TaggedGroup], phrases: List[TaggedGroup]) -> None:
        """
        Set each phrase's group_id to a clause containing it.

        Clauses are visited in order and every containing clause overwrites
        the previous assignment, so the last containing clause wins.
        """
        for clause in clauses:
            for phrase in phrases:
                if clause.opening <= phrase.opening and clause.closing >= phrase.closing:
                    phrase.group_id = clause.id

    def decompose(self, text: str) -> Sentence:
        """
        Decompose bracketed parse text into a Sentence.

        Args:
            text: Bracketed parse, e.g. "[TOP [S [NP ...] [VP ...]]]"

        Returns:
            Sentence with clauses, phrases and words filled in

        Raises:
            MalformedInputError: If the delimiters in text are unbalanced
        """
        spans = self.bracket_matcher.get_matches(text)
        clauses = self.mark_clauses(spans, text)
        phrases = self.mark_phrases(spans, text)
        self.assign_groups(clauses, phrases)
        words = self.mark_words(spans, text)

        sentence = Sentence(
            id=self.settings.ids.next_sentence_id(),
            parsed_text=text,
            clauses=clauses,
            phrases=phrases,
            words=words,
        )
        logger.info(
            "Decomposed sentence %s: %s clauses, %s phrases, %s words",
            sentence.id,
            len(clauses),
            len(phrases),
            len(words),
        )
        return sentence


def phrases_by_length(phrases: List[TaggedGroup]) -> List[TaggedGroup]:
    """Return phrases ordered longest first, filling in their length."""
    for phrase in phrases:
        phrase.length = phrase.closing - phrase.opening
    return sorted(phrases, key=lambda p: p.length, reverse=True)
