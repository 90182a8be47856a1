"""
Clause resolution: matches every clause pattern of a sentence against the
sentence pattern rules of a grammar.

Steps:
1. Format one aliased pattern per clause
2. Record every rule whose pattern is an ordered subsequence of the clause
   pattern (ambiguous matches are all kept)
3. For clauses with no match under an SVO grammar, assume the subject was
   elided and carried over from the previous clause: prepend a noun phrase
   and try again, linking the clause to the previous clause on success
4. Record the clauses still unmatched as errors
"""

import logging
from typing import Callable, Dict, List, Optional

from ..grammar_provider import GrammarContext
from ..sentence import Sentence
from ..tag_aliases import NOUN_PHRASE_ALIAS
from .formatter import PatternFormatter
from .matcher import matches_pattern

logger = logging.getLogger(__name__)

NO_PARENT_ID = -1


class ClauseResolver:
    """Annotates decomposed sentences with the rules their clauses match."""

    def __init__(self, grammar: GrammarContext):
        """
        Initialize with the grammar the clauses are resolved against.

        Args:
            grammar: Grammar context supplying typology, rules and lexicon
        """
        self.grammar = grammar
        self.formatter = PatternFormatter(grammar)

    def match_rules(self, pattern: str) -> List[int]:
        """Indices of every rule whose pattern occurs in order within pattern."""
        return [
            j
            for j, rule_pattern in enumerate(self.grammar.rule_patterns)
            if matches_pattern(rule_pattern, pattern)
        ]

    def _fallback(self, sentence: Sentence, clause_index: int, pattern: str) -> List[int]:
        """Retry a clause assuming an elided subject from the previous clause."""
        if not self.grammar.supports_fallback:
            logger.debug(
                "No fallback for typology %s, clause %s stays unresolved",
                self.grammar.typology,
                clause_index,
            )
            return []

        hits = self.match_rules(NOUN_PHRASE_ALIAS + pattern)
        if hits:
            clause = sentence.clauses[clause_index]
            if clause_index > 0:
                clause.parent_id = sentence.clauses[clause_index - 1].id
            else:
                clause.parent_id = NO_PARENT_ID
            logger.debug(
                "Clause %s resolved by fallback to rules %s (parent %s)",
                clause_index,
                hits,
                clause.parent_id,
            )
        return hits

    def resolve(
        self,
        sentence: Sentence,
        progress_callback: Optional[Callable[[str, int, int], None]] = None,
    ) -> Sentence:
        """
        Resolve the clause structure of a sentence in place.

        Re-running on the same sentence rebuilds clause_structure_indices and
        errors from scratch, so the result does not change.

        Args:
            sentence: Sentence built by the tree decomposer
            progress_callback: Optional callback function(stage_name, current, total)

        Returns:
            The same sentence, with clause_structure_indices and errors set
        """
        patterns = self.formatter.format_sentence(sentence)
        total = len(patterns)

        if progress_callback:
            progress_callback("matching", 0, total)

        indices: Dict[int, List[int]] = {}
        unresolved: List[int] = []
        for i, pattern in enumerate(patterns):
            hits = self.match_rules(pattern)
            if hits:
                indices[i] = hits
            else:
                unresolved.append(i)
            if progress_callback:
                progress_callback("matching", i + 1, total)

        if progress_callback:
            progress_callback("fallback", 0, len(unresolved))

        errors: List[int] = []
        for n, i in enumerate(unresolved, start=1):
            hits = self._fallback(sentence, i, patterns[i])
            if hits:
                indices[i] = hits
            else:
                errors.append(i)
            if progress_callback:
                progress_callback("fallback", n, len(unresolved))

        sentence.clause_structure_indices = dict(sorted(indices.items()))
        sentence.errors = errors

        if errors:
            logger.info("Sentence %s: unresolved clauses %s", sentence.id, errors)
        logger.info(
            "Resolved %s of %s clauses in sentence %s",
            len(indices),
            total,
            sentence.id,
        )
        return sentence
