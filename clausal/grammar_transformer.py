"""
Grammar Transformer: Lark tree transformer for the grammar definition language.

Converts Lark parse trees into GrammarDef structures, checking that the
statements make up a usable grammar (exactly one typology, at most one
language, no empty pattern).
"""

from typing import Optional

from lark import Transformer, v_args

from clausal import grammar_ast as ast


@v_args(inline=True)
class GrammarTransformer(Transformer):
    """Transformer that converts Lark parse trees into a GrammarDef."""

    def __init__(self, grammar_file_path: Optional[str] = None):
        super().__init__()
        self.grammar_file_path = grammar_file_path

    def start(self, version, *statements):
        """Collect statements into a GrammarDef."""
        language = None
        typology = None
        patterns = []
        linking_verbs = []
        for item in statements:
            if isinstance(item, ast.LanguageDecl):
                if language is not None:
                    raise ValueError(
                        f"Language declared twice: '{language}' and '{item.name}'"
                    )
                language = item.name
            elif isinstance(item, ast.TypologyDecl):
                if typology is not None:
                    raise ValueError(
                        f"Typology declared twice: '{typology}' and '{item.name}'"
                    )
                typology = item.name
            elif isinstance(item, ast.PatternRule):
                patterns.append(item)
            else:
                linking_verbs.extend(item.words)

        if typology is None:
            raise ValueError("Grammar must declare a typology")

        return ast.GrammarDef(
            version=version,
            typology=typology,
            language=language,
            patterns=tuple(patterns),
            linking_verbs=tuple(linking_verbs),
            grammar_file_path=self.grammar_file_path,
        )

    def version_stmt(self, version_token):
        return ast.Version(value=str(version_token))

    def language_stmt(self, name):
        return ast.LanguageDecl(name=str(name))

    def typology_stmt(self, name):
        return ast.TypologyDecl(name=str(name))

    def pattern_stmt(self, names):
        """Transform a pattern statement into a PatternRule."""
        return ast.PatternRule(tags=tuple(names))

    def linking_stmt(self, names):
        """Transform a linking statement, storing base forms in lower case."""
        return ast.LinkingVerbs(words=tuple(name.lower() for name in names))

    def name_list(self, *names):
        return [str(name) for name in names]
