"""
Tag aliasing: maps grammatical categories onto a one-character alphabet so
that rule patterns and observed clause patterns compare as plain strings.
"""

import re
from functools import lru_cache
from typing import Iterable

# Canonical categories, aliased "a" through "g" in this order
TAG_TYPES = ("NP", "V-be", "LV", "V-int", "V-tr", "ADV/TP", "ADJ")
TAG_TYPE_ALIASES = ("a", "b", "c", "d", "e", "f", "g")
CATCH_ALL_ALIAS = "h"
NOUN_PHRASE_ALIAS = "a"

_ALIAS_BY_TAG = dict(zip(TAG_TYPES, TAG_TYPE_ALIASES))
# Digits that tell repeated noun phrases apart (NP1, NP2, NP3)
_DISAMBIGUATOR = re.compile(r"[123]")


@lru_cache(maxsize=256)
def get_tag_alias(tag: str) -> str:
    """Return the alias for tag, or the catch-all alias for unknown tags."""
    return _ALIAS_BY_TAG.get(_DISAMBIGUATOR.sub("", tag), CATCH_ALL_ALIAS)


def alias_pattern(tags: Iterable[str]) -> str:
    return "".join(get_tag_alias(tag) for tag in tags)


def alias_rule(rule: str) -> str:
    """Alias a comma separated rule such as "NP, V-tr, NP"."""
    return alias_pattern(part.strip() for part in rule.split(",") if part.strip())
