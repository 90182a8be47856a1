"""
Pattern formatting: one aliased pattern string per clause.

For each clause the formatter walks the phrases that open between the
clause's opening and the next clause's opening, emitting each phrase's tag
followed by the tags of the words in that phrase's window. Verb tags are
replaced by their subcategory before aliasing.
"""

import logging
from typing import List, Optional

from ..grammar_provider import GrammarContext
from ..sentence import Sentence, TaggedGroup, Word
from ..tag_aliases import alias_pattern
from .verbs import VerbClassifier

logger = logging.getLogger(__name__)


class PatternFormatter:
    """Builds clause patterns for a sentence under one grammar."""

    def __init__(self, grammar: GrammarContext):
        self.grammar = grammar
        self.verb_classifier = VerbClassifier(grammar)

    @staticmethod
    def clause_phrases(
        sentence: Sentence, clause_index: int
    ) -> tuple[List[TaggedGroup], int]:
        """
        Select the phrases treated as belonging to a clause.

        Returns:
            The phrases opening between the clause's opening and the next
            clause's opening (end of text for the last clause), and that
            upper bound
        """
        clauses = sentence.clauses
        clause = clauses[clause_index]
        if clause_index < len(clauses) - 1:
            upper_bound = clauses[clause_index + 1].opening
        else:
            upper_bound = len(sentence.parsed_text)

        phrases = [
            p for p in sentence.phrases if clause.opening <= p.opening <= upper_bound
        ]
        return phrases, upper_bound

    def _word_tag(self, word: Word, next_phrase: Optional[TaggedGroup]) -> str:
        if not word.tag.startswith("V"):
            return word.tag
        next_phrase_tag = next_phrase.tag if next_phrase is not None else None
        verb_type = self.verb_classifier.classify(word.text, word.tag, next_phrase_tag)
        return verb_type.value if verb_type is not None else word.tag

    def clause_tags(self, sentence: Sentence, clause_index: int) -> List[str]:
        """Unaliased tag sequence for one clause."""
        phrases, upper_bound = self.clause_phrases(sentence, clause_index)
        tags: List[str] = []
        for j, phrase in enumerate(phrases):
            next_phrase = phrases[j + 1] if j < len(phrases) - 1 else None
            window_end = next_phrase.opening if next_phrase is not None else upper_bound

            tags.append(phrase.tag)
            for word in sentence.words:
                if word.index >= phrase.opening and word.index_end <= window_end:
                    tags.append(self._word_tag(word, next_phrase))
        return tags

    def format_sentence(self, sentence: Sentence) -> List[str]:
        """Aliased pattern strings, one per clause, in clause order."""
        patterns = []
        for i in range(len(sentence.clauses)):
            pattern = alias_pattern(self.clause_tags(sentence, i))
            logger.debug("Clause %s pattern: %s", i, pattern)
            patterns.append(pattern)
        return patterns
