from dataclasses import dataclass, field
from typing import Optional

# === Statements ===


@dataclass(frozen=True)
class Version:
    """Represents the grammar definition language version."""

    value: str


@dataclass(frozen=True)
class LanguageDecl:
    """Represents the language a grammar describes (e.g. EN)."""

    name: str


@dataclass(frozen=True)
class TypologyDecl:
    """Represents the phrase structure typology (e.g. SVO)."""

    name: str


@dataclass(frozen=True)
class PatternRule:
    """Represents one legal clause pattern, an ordered list of category names."""

    tags: tuple[str, ...]

    @property
    def text(self) -> str:
        """The rule in the comma separated form used by rule stores."""
        return ",".join(self.tags)


@dataclass(frozen=True)
class LinkingVerbs:
    """Represents a linking statement listing linking verb base forms."""

    words: tuple[str, ...]


# === Top-Level Structure ===


@dataclass(frozen=True)
class GrammarDef:
    """Represents a parsed grammar definition file."""

    version: Version
    typology: str
    language: Optional[str] = None
    patterns: tuple[PatternRule, ...] = field(default_factory=tuple)
    linking_verbs: tuple[str, ...] = field(default_factory=tuple)
    grammar_file_path: Optional[str] = None
