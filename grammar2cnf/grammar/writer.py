"""
Serialization of a grammar back to the exchange format.
"""
from pathlib import Path
from typing import Union

from .errors import GrammarIOError
from .symbols import Grammar
from grammar2cnf.config import config
from grammar2cnf.logger import app_logger


class GrammarWriter:
    """Writes terminals, non-terminals and productions, one item per line."""

    def __init__(self, encoding: str = None):
        self.encoding = encoding or config.get('io.encoding', 'utf-8')

    def dumps(self, grammar: Grammar) -> str:
        # Symbol sections are sorted, so the start symbol is not necessarily first
        lines = [str(len(grammar.terminals))]
        lines.extend(sorted(grammar.terminals))
        lines.append(str(len(grammar.nonterminals)))
        lines.extend(sorted(grammar.nonterminals))
        lines.append(str(len(grammar.productions)))
        lines.extend(f"{p.lhs} {p.rhs_text()}" for p in grammar.productions)
        return "\n".join(lines) + "\n"

    def write(self, grammar: Grammar, path: Union[str, Path]):
        """
        Write the grammar to a file.

        Raises:
            GrammarIOError: if the file cannot be created
        """
        text = self.dumps(grammar)
        try:
            with open(path, 'w', encoding=self.encoding) as f:
                f.write(text)
        except OSError as e:
            app_logger.warning(f"Cannot write grammar file {path}: {e}")
            raise GrammarIOError(f"Cannot create output file: {path}") from e

        app_logger.info(f"Grammar written to {path} ({len(grammar.productions)} productions)")


def dump_grammar(grammar: Grammar) -> str:
    return GrammarWriter().dumps(grammar)


def write_grammar(grammar: Grammar, path: Union[str, Path]):
    GrammarWriter().write(grammar, path)
