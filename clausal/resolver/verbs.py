"""
Heuristic verb subcategorization.

Classifies a verb token as a copular "be" verb, a linking verb, a transitive
verb or an intransitive verb from its surface form and the phrase that
follows it. Only the SVO typology is covered.
"""

import logging
from enum import Enum
from typing import Optional

from ..grammar_provider import SVO_TYPOLOGY, GrammarContext
from ..parser.tags import PhraseTag

logger = logging.getLogger(__name__)

BE_VERBS = frozenset({"is", "am", "are", "was", "were", "been", "being"})

# Stripped in this order, at most one per token
_SUFFIXES = ("ing", "ed", "s")


class VerbType(str, Enum):
    """Verb categories, named as they appear in sentence pattern rules."""

    BE = "V-be"
    LINKING = "LV"
    INTRANSITIVE = "V-int"
    TRANSITIVE = "V-tr"


def base_form(word: str) -> str:
    """Lower-case word and strip one trailing "ing", else "ed", else "s"."""
    base = word.lower()
    for suffix in _SUFFIXES:
        if base.endswith(suffix):
            return base[: -len(suffix)]
    return base


def is_be_verb(word: str) -> bool:
    # The stemmer turns "is", "was" and "being" into non-words, so the
    # lower-cased surface form is checked as well as the base form.
    return word.lower() in BE_VERBS or base_form(word) in BE_VERBS


class VerbClassifier:
    """Classifies verbs against the linking verb lexicon of a grammar."""

    def __init__(self, grammar: GrammarContext):
        self.grammar = grammar

    def classify(
        self, word: str, word_tag: str, next_phrase_tag: Optional[str]
    ) -> Optional[VerbType]:
        """
        Classify a verb token.

        Args:
            word: Surface form of the verb
            word_tag: Part-of-speech tag of the verb (e.g. VBD)
            next_phrase_tag: Tag of the phrase that follows the verb's
                phrase, None when there is none

        Returns:
            The verb type, or None when the grammar's typology has no
            verb classification
        """
        if self.grammar.typology != SVO_TYPOLOGY:
            logger.debug(
                "No verb classification for typology %s, keeping %s",
                self.grammar.typology,
                word_tag,
            )
            return None

        base = base_form(word)
        be_verb = is_be_verb(word)

        if be_verb and next_phrase_tag == PhraseTag.ADVP.value:
            verb_type = VerbType.BE
        elif (
            self.grammar.is_linking_verb(word) or self.grammar.is_linking_verb(base)
        ) and (
            be_verb or next_phrase_tag in (PhraseTag.ADJP.value, PhraseTag.NP.value)
        ):
            verb_type = VerbType.LINKING
        elif next_phrase_tag == PhraseTag.NP.value:
            # A verb followed by a noun phrase takes a direct object
            verb_type = VerbType.TRANSITIVE
        else:
            verb_type = VerbType.INTRANSITIVE

        logger.debug(
            "Verb '%s' (%s, base '%s', next %s) -> %s",
            word,
            word_tag,
            base,
            next_phrase_tag,
            verb_type.value,
        )
        return verb_type
