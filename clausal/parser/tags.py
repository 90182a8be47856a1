"""
Penn Treebank tag categories used to split a parse into clauses, phrases and words.
"""

from enum import Enum

from ..core import DEFAULT_TOP_TAG


class ClauseTag(str, Enum):
    """Clause level bracket labels."""

    # Simple declarative clause, no subordinating conjunction, wh-word or inversion
    S = "S"
    # Clause introduced by a (possibly empty) subordinating conjunction
    SBAR = "SBAR"
    # Direct question introduced by a wh-word or wh-phrase
    SBARQ = "SBARQ"
    # Inverted declarative sentence, subject follows the tensed verb or modal
    SINV = "SINV"
    # Inverted yes/no question, or main clause of a wh-question inside SBARQ
    SQ = "SQ"


class PhraseTag(str, Enum):
    """Phrase level bracket labels."""

    ADJP = "ADJP"
    ADVP = "ADVP"
    CONJP = "CONJP"
    FRAG = "FRAG"
    INTJ = "INTJ"
    LST = "LST"  # list marker, includes surrounding punctuation
    NAC = "NAC"  # not a constituent
    NP = "NP"
    NX = "NX"  # head of a complex NP
    PP = "PP"
    PRN = "PRN"
    PRT = "PRT"
    QP = "QP"
    RRC = "RRC"  # reduced relative clause
    UCP = "UCP"  # unlike coordinated phrase
    VP = "VP"
    WHADJP = "WHADJP"
    WHAVP = "WHAVP"
    WHNP = "WHNP"
    WHPP = "WHPP"
    X = "X"  # unknown, uncertain or unbracketable


class TagKind(Enum):
    CLAUSE = "clause"
    PHRASE = "phrase"
    ROOT = "root"
    WORD = "word"


CLAUSE_TAGS = frozenset(tag.value for tag in ClauseTag)
PHRASE_TAGS = frozenset(tag.value for tag in PhraseTag)


def is_clause_tag(tag: str) -> bool:
    return tag in CLAUSE_TAGS


def is_phrase_tag(tag: str) -> bool:
    return tag in PHRASE_TAGS


def classify_tag(tag: str, top_tag: str = DEFAULT_TOP_TAG) -> TagKind:
    """Decide whether a bracket label is a clause, a phrase, the root or a word."""
    if is_clause_tag(tag):
        return TagKind.CLAUSE
    if is_phrase_tag(tag):
        return TagKind.PHRASE
    if tag == top_tag:
        return TagKind.ROOT
    return TagKind.WORD
