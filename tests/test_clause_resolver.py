"""
Tests for the ClauseResolver and the analyze entry point.

This module tests:
1. Direct rule matching, including ambiguous matches
2. Elided-subject fallback for SVO grammars
3. Unresolved clauses and non-SVO typologies
4. Idempotence and progress reporting
5. End-to-end analysis with the bundled English grammar
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from clausal import analyze
from clausal.core import MalformedInputError, ParseSettings
from clausal.grammar_provider import GrammarContext, StaticGrammarProvider
from clausal.parser import TreeDecomposer
from clausal.resolver import ClauseResolver

IGHO = "[TOP [S [NP [PRP Igho]] [VP [VBD gave] [NP [NNP Ese]] [NP [DT a] [NN cake]]]]]"
TWO_CLAUSES = "[TOP [S [NP [PRP I]] [VP [VBD came]]] [S [VP [VBD saw] [NP [PRP it]]]]]"


def grammar(rules, typology="SVO", linking_verbs=()):
    return GrammarContext(StaticGrammarProvider(typology, rules, linking_verbs))


def decompose(text):
    return TreeDecomposer(ParseSettings()).decompose(text)


class TestClauseResolver:
    """Test the ClauseResolver class functionality."""

    def test_direct_match(self):
        resolver = ClauseResolver(grammar(["NP,V-tr,NP"]))
        sentence = resolver.resolve(decompose(IGHO))

        assert sentence.clause_structure_indices == {0: [0]}
        assert sentence.errors == []
        assert sentence.clauses[0].parent_id is None

    def test_ambiguous_matches_are_all_kept(self):
        resolver = ClauseResolver(
            grammar(["NP,V-int", "NP,V-tr,NP", "NP1,V-tr,NP2,NP3"])
        )
        sentence = resolver.resolve(decompose(IGHO))

        assert sentence.clause_structure_indices == {0: [1, 2]}
        assert sentence.errors == []

    def test_match_rules(self):
        resolver = ClauseResolver(grammar(["NP,V-int", "NP,V-tr,NP"]))
        assert resolver.match_rules("ahhd") == [0]
        assert resolver.match_rules("heah") == []
        assert resolver.match_rules("aheah") == [1]

    def test_fallback_on_first_clause_has_no_parent(self):
        resolver = ClauseResolver(grammar(["NP,NP,V-tr"]))
        sentence = resolver.resolve(decompose(IGHO))

        assert sentence.clause_structure_indices == {0: [0]}
        assert sentence.errors == []
        assert sentence.clauses[0].parent_id == -1

    def test_fallback_links_clause_to_previous_clause(self):
        resolver = ClauseResolver(grammar(["NP,V-int", "NP,V-tr,NP"]))
        sentence = resolver.resolve(decompose(TWO_CLAUSES))

        first, second = sentence.clauses
        assert sentence.clause_structure_indices == {0: [0], 1: [1]}
        assert sentence.errors == []
        assert first.parent_id is None
        assert second.parent_id == first.id

    def test_unresolved_clause_does_not_block_siblings(self):
        resolver = ClauseResolver(grammar(["NP,V-int"]))
        sentence = resolver.resolve(decompose(TWO_CLAUSES))

        assert sentence.clause_structure_indices == {0: [0]}
        assert sentence.errors == [1]
        assert not sentence.is_resolved
        assert sentence.clauses[1].parent_id is None

    def test_no_rule_matches(self):
        resolver = ClauseResolver(grammar(["V-be"]))
        sentence = resolver.resolve(decompose(IGHO))

        assert sentence.clause_structure_indices == {}
        assert sentence.errors == [0]

    def test_no_fallback_for_other_typologies(self):
        resolver = ClauseResolver(grammar(["NP,NP,V-tr", "NP,NP"], typology="SOV"))
        sentence = resolver.resolve(decompose(TWO_CLAUSES))

        # "NP,NP" would match the second clause after prepending a subject
        assert sentence.clause_structure_indices == {}
        assert sentence.errors == [0, 1]
        assert all(c.parent_id is None for c in sentence.clauses)

    def test_empty_rule_table(self):
        resolver = ClauseResolver(grammar([]))
        sentence = resolver.resolve(decompose(TWO_CLAUSES))

        assert sentence.clause_structure_indices == {}
        assert sentence.errors == [0, 1]

    def test_resolve_is_idempotent(self):
        resolver = ClauseResolver(grammar(["NP,V-int", "NP,V-tr,NP"]))
        sentence = resolver.resolve(decompose(TWO_CLAUSES))
        indices = dict(sentence.clause_structure_indices)
        errors = list(sentence.errors)
        parents = [c.parent_id for c in sentence.clauses]

        resolver.resolve(sentence)

        assert sentence.clause_structure_indices == indices
        assert sentence.errors == errors
        assert [c.parent_id for c in sentence.clauses] == parents

    def test_progress_callback(self):
        resolver = ClauseResolver(grammar(["NP,V-int"]))
        calls = []
        resolver.resolve(
            decompose(TWO_CLAUSES),
            progress_callback=lambda stage, current, total: calls.append(
                (stage, current, total)
            ),
        )

        assert calls == [
            ("matching", 0, 2),
            ("matching", 1, 2),
            ("matching", 2, 2),
            ("fallback", 0, 1),
            ("fallback", 1, 1),
        ]


class TestAnalyze:
    def test_english_grammar_end_to_end(self):
        sentence = analyze(IGHO, GrammarContext.english(), settings=ParseSettings())

        english = GrammarContext.english()
        matched = [english.rules[j] for j in sentence.clause_structure_indices[0]]
        assert matched == ["NP1,V-tr,NP2", "NP1,V-tr,NP2,NP3", "NP1,V-tr,NP2,NP2"]
        assert sentence.errors == []

    def test_linking_verb_end_to_end(self):
        sentence = analyze(
            "[TOP [S [NP [PRP He]] [VP [VBD became] [NP [DT a] [NN doctor]]]]]",
            GrammarContext.english(),
            settings=ParseSettings(),
        )
        # "became" does not stem to "become", so it is taken as transitive
        english = GrammarContext.english()
        matched = [english.rules[j] for j in sentence.clause_structure_indices[0]]
        assert "NP1,V-tr,NP2" in matched

        sentence = analyze(
            "[TOP [S [NP [PRP He]] [VP [VBZ seems] [NP [DT a] [NN doctor]]]]]",
            english,
            settings=ParseSettings(),
        )
        matched = [english.rules[j] for j in sentence.clause_structure_indices[0]]
        assert matched == ["NP1,LV,NP1"]

    def test_fallback_attempted_before_error(self):
        sentence = analyze(IGHO, grammar(["NP,NP,V-tr"]), settings=ParseSettings())
        assert sentence.clause_structure_indices == {0: [0]}
        assert sentence.errors == []

    def test_malformed_input_is_distinct_from_unresolved(self):
        with pytest.raises(MalformedInputError):
            analyze("[TOP [S [NP [PRP I]]]]]", grammar(["NP,V-int"]))

        sentence = analyze(IGHO, grammar(["V-be"]), settings=ParseSettings())
        assert sentence.errors == [0]
