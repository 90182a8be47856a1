"""
Grammar providers and the grammar context.

A grammar provider supplies the three tables the clause resolver needs for a
language: its phrase structure typology, its sentence pattern rules and its
linking verb lexicon. A GrammarContext reads those tables from a provider once
and keeps them, together with the aliased rule patterns, for as long as the
caller holds on to it.

Providers:
- StaticGrammarProvider: tables given in memory
- FileGrammarProvider: tables read from a grammar definition file
- SqliteGrammarProvider: tables read from a rules database
"""

import logging
import sqlite3
from contextlib import closing
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from clausal.core import GrammarError
from clausal.grammar_ast import GrammarDef
from clausal.grammar_parser import parse_file
from clausal.tag_aliases import alias_rule

logger = logging.getLogger(__name__)

SVO_TYPOLOGY = "SVO"
DEFAULT_LANGUAGE = "EN"

BUILTIN_GRAMMAR_DIR = Path(__file__).parent / "grammars"
ENGLISH_GRAMMAR_PATH = BUILTIN_GRAMMAR_DIR / "english.grammar"

# ruleTypeId values in the rules database
RULE_TYPE_SENTENCE_PATTERN = 1
RULE_TYPE_LINKING_VERB = 2
RULE_TYPE_PHRASE_STRUCTURE = 3

# parentId used for rules stored without one
NO_PARENT_ID = -1


class GrammarProvider:
    """Interface for stores that supply grammar tables for one language."""

    language: Optional[str] = None

    def phrase_structure_typology(self) -> str:
        """Phrase structure typology of the language, e.g. "SVO"."""
        raise NotImplementedError

    def sentence_pattern_rules(self) -> List[str]:
        """Ordered comma separated rules, e.g. ["NP,V-tr,NP", "NP,V-int"]."""
        raise NotImplementedError

    def linking_verb_lexicon(self) -> Mapping[str, Any]:
        """Linking verb base forms mapped to store specific metadata."""
        raise NotImplementedError


class StaticGrammarProvider(GrammarProvider):
    """Grammar provider backed by tables held in memory."""

    def __init__(
        self,
        typology: str,
        rules: Iterable[str],
        linking_verbs: Iterable[str] = (),
        language: Optional[str] = DEFAULT_LANGUAGE,
    ):
        self.language = language
        self._typology = typology
        self._rules = list(rules)
        self._linking_verbs = {verb: None for verb in linking_verbs}

    def phrase_structure_typology(self) -> str:
        return self._typology

    def sentence_pattern_rules(self) -> List[str]:
        return list(self._rules)

    def linking_verb_lexicon(self) -> Mapping[str, Any]:
        return dict(self._linking_verbs)


class FileGrammarProvider(GrammarProvider):
    """Grammar provider backed by a grammar definition file."""

    def __init__(self, path):
        self.path = str(path)
        self._grammar: Optional[GrammarDef] = None

    @property
    def grammar(self) -> GrammarDef:
        if self._grammar is None:
            self._grammar = parse_file(self.path)
            logger.debug(
                "Loaded grammar %s: %s patterns, %s linking verbs",
                self.path,
                len(self._grammar.patterns),
                len(self._grammar.linking_verbs),
            )
        return self._grammar

    @property
    def language(self) -> Optional[str]:  # type: ignore[override]
        return self.grammar.language

    def phrase_structure_typology(self) -> str:
        return self.grammar.typology

    def sentence_pattern_rules(self) -> List[str]:
        return [pattern.text for pattern in self.grammar.patterns]

    def linking_verb_lexicon(self) -> Mapping[str, Any]:
        return {verb: None for verb in self.grammar.linking_verbs}


class SqliteGrammarProvider(GrammarProvider):
    """
    Grammar provider backed by a SQLite rules database.

    The database holds a languages table (langId, lang) and a rules table
    (ruleId, parentId, rule, ruleTypeId, langId). Rule type 1 rows are
    sentence patterns, type 2 rows linking verbs and the type 3 row the
    phrase structure typology. Rows are read ordered by parentId, ruleId.
    """

    def __init__(self, db_path, language: str = DEFAULT_LANGUAGE):
        self.db_path = str(db_path)
        self.language = language
        self._language_id: Optional[int] = None

    def _connect(self) -> sqlite3.Connection:
        try:
            uri = Path(self.db_path).resolve().as_uri() + "?mode=ro"
            return sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise GrammarError(
                f"Cannot open rules database {self.db_path}: {e}"
            ) from e

    def _query(self, sql: str, params: Tuple) -> List[Tuple]:
        try:
            with closing(self._connect()) as conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise GrammarError(f"Rules database query failed: {e}") from e

    @property
    def language_id(self) -> int:
        if self._language_id is None:
            rows = self._query(
                "SELECT langId FROM languages WHERE lang = ?", (self.language,)
            )
            if not rows or rows[0][0] is None:
                raise GrammarError(f"Unknown language: {self.language}")
            self._language_id = int(rows[0][0])
        return self._language_id

    def _rules_by_type(self, rule_type_id: int) -> List[Tuple[int, int, str]]:
        rows = self._query(
            "SELECT ruleId, parentId, rule FROM rules "
            "WHERE ruleTypeId = ? AND langId = ? ORDER BY parentId, ruleId",
            (rule_type_id, self.language_id),
        )
        rules = []
        for rule_id, parent_id, rule in rows:
            if parent_id is None:
                logger.warning(
                    "Rule %s has no parentId, treating it as %s",
                    rule_id,
                    NO_PARENT_ID,
                )
                parent_id = NO_PARENT_ID
            rules.append((int(rule_id), int(parent_id), str(rule)))
        return rules

    def phrase_structure_typology(self) -> str:
        rules = self._rules_by_type(RULE_TYPE_PHRASE_STRUCTURE)
        if not rules:
            raise GrammarError(
                f"No phrase structure typology stored for language {self.language}"
            )
        return rules[0][2]

    def sentence_pattern_rules(self) -> List[str]:
        return [rule for _, _, rule in self._rules_by_type(RULE_TYPE_SENTENCE_PATTERN)]

    def linking_verb_lexicon(self) -> Mapping[str, Any]:
        """Linking verbs mapped to their (ruleId, parentId)."""
        return {
            rule: (rule_id, parent_id)
            for rule_id, parent_id, rule in self._rules_by_type(RULE_TYPE_LINKING_VERB)
        }


class GrammarContext:
    """
    Grammar tables for one language, read once from a provider.

    The context is owned by the caller; build a new one when the active
    language or typology changes.
    """

    def __init__(self, provider: GrammarProvider):
        self.provider = provider

    @classmethod
    def from_file(cls, path) -> "GrammarContext":
        return cls(FileGrammarProvider(path))

    @classmethod
    def from_database(cls, db_path, language: str = DEFAULT_LANGUAGE) -> "GrammarContext":
        return cls(SqliteGrammarProvider(db_path, language=language))

    @classmethod
    def english(cls) -> "GrammarContext":
        """Context for the bundled English SVO grammar."""
        return cls.from_file(ENGLISH_GRAMMAR_PATH)

    @property
    def language(self) -> Optional[str]:
        return self.provider.language

    @cached_property
    def typology(self) -> str:
        typology = self.provider.phrase_structure_typology()
        if not typology:
            raise GrammarError("Grammar provider returned an empty typology")
        return typology

    @cached_property
    def rules(self) -> Tuple[str, ...]:
        rules = tuple(self.provider.sentence_pattern_rules())
        if not rules:
            logger.warning(
                "No sentence pattern rules for language %s; every clause will be unresolved",
                self.language,
            )
        return rules

    @cached_property
    def rule_patterns(self) -> Tuple[str, ...]:
        """Rules aliased into the pattern alphabet, in rule order."""
        patterns = tuple(alias_rule(rule) for rule in self.rules)
        logger.debug("Aliased %s sentence pattern rules", len(patterns))
        return patterns

    @cached_property
    def linking_verbs(self) -> Dict[str, Any]:
        verbs = {
            str(verb).lower(): meta
            for verb, meta in self.provider.linking_verb_lexicon().items()
        }
        if not verbs:
            logger.warning("Empty linking verb lexicon for language %s", self.language)
        return verbs

    @property
    def supports_fallback(self) -> bool:
        """Elided-subject fallback is defined for SVO grammars only."""
        return self.typology == SVO_TYPOLOGY

    def is_linking_verb(self, base_word: str) -> bool:
        return base_word.lower() in self.linking_verbs
