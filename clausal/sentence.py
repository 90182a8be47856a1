import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# === Parse Tree Nodes ===


@dataclass
class Span:
    """Character offsets of a matched bracket pair in the parsed text."""

    opening: int
    closing: int


@dataclass
class TaggedGroup(Span):
    """A clause or phrase: a span carrying a grammatical tag."""

    id: int = 0
    tag: str = ""
    group_id: Optional[int] = None  # enclosing clause id, phrases only
    parent_id: Optional[int] = None  # set by fallback resolution, -1 for none
    length: int = 0  # only filled in when ordering by length


@dataclass
class Word:
    """A leaf word with the offsets of its surface text."""

    index: int
    index_end: int
    tag: str
    text: str


# === Sentence Aggregate ===


@dataclass
class Sentence:
    """
    A decomposed sentence and its clause structure annotations.

    clause_structure_indices maps a clause index to every rule index whose
    pattern the clause matched; errors holds the clause indices that matched
    no rule, even after fallback.
    """

    id: int
    parsed_text: str
    clauses: List[TaggedGroup] = field(default_factory=list)
    phrases: List[TaggedGroup] = field(default_factory=list)
    words: List[Word] = field(default_factory=list)
    clause_structure_indices: Dict[int, List[int]] = field(default_factory=dict)
    errors: List[int] = field(default_factory=list)

    @property
    def is_resolved(self) -> bool:
        return not self.errors

    def phrases_in_clause(self, clause_id: int) -> List[TaggedGroup]:
        return [p for p in self.phrases if p.group_id == clause_id]

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form of the sentence, safe to pass to json.dumps."""
        result = asdict(self)
        result["clause_structure_indices"] = {
            str(k): list(v) for k, v in self.clause_structure_indices.items()
        }
        return result

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)
