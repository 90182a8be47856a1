from typing import Callable, Optional

from clausal.core import ParseSettings
from clausal.grammar_provider import GrammarContext
from clausal.parser import TreeDecomposer
from clausal.resolver import ClauseResolver
from clausal.sentence import Sentence


def analyze(
    text: str,
    grammar: GrammarContext,
    settings: Optional[ParseSettings] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> Sentence:
    """
    Decompose a bracketed parse and resolve its clause structure.

    Raises:
        MalformedInputError: If the delimiters in text are unbalanced. A
            sentence whose clauses match no rule is returned normally with
            those clauses listed in its errors.
    """
    sentence = TreeDecomposer(settings).decompose(text)
    return ClauseResolver(grammar).resolve(sentence, progress_callback=progress_callback)
