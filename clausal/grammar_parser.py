from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import VisitError

from clausal.grammar_ast import GrammarDef
from clausal.grammar_transformer import GrammarTransformer

# Grammar definition language version.
# Must match the version statement at the top of every grammar file; bump it
# together with grammar.lark when the language changes.
GRAMMAR_DSL_VERSION = "1.0"

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"
with open(GRAMMAR_PATH, "r", encoding="utf-8") as f:
    GRAMMAR_DSL = f.read()

dsl_parser = Lark(
    GRAMMAR_DSL, start="start", parser="lalr", propagate_positions=True
)


def parse_string(
    code: str, *, unwrap: bool = True, grammar_file_path: Optional[str] = None
) -> GrammarDef:
    """
    Parse grammar definition source into a GrammarDef.

    Args:
        code: Grammar definition source
        unwrap: Re-raise errors from the transformer instead of the
            wrapping VisitError
        grammar_file_path: Path the source was read from, kept on the result

    Returns:
        The parsed GrammarDef
    """
    tree = dsl_parser.parse(code)
    try:
        grammar = GrammarTransformer(grammar_file_path=grammar_file_path).transform(
            tree
        )
    except VisitError as ve:
        if unwrap:
            raise ve.orig_exc from ve
        raise

    # Make sure the version matches the expected grammar language version
    if grammar.version.value != GRAMMAR_DSL_VERSION:
        raise ValueError(
            f"Unsupported grammar version: {grammar.version.value}. "
            f"Expected {GRAMMAR_DSL_VERSION}."
        )
    return grammar


def parse_file(path, *, unwrap: bool = True) -> GrammarDef:
    with open(path, "r", encoding="utf-8") as file:
        return parse_string(file.read(), unwrap=unwrap, grammar_file_path=str(path))
