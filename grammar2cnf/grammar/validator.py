"""
Grammar validation: structural format checks and the preconditions of the CNF transformation.
"""
import unicodedata

from .errors import GrammarFormatError, PreconditionError
from .symbols import Grammar, NonTerminal, is_upper_letter
from grammar2cnf.logger import app_logger


class GrammarValidator:
    """Runs the format pass and the precondition pass over a loaded grammar."""

    def __init__(self, grammar: Grammar):
        self.grammar = grammar

    def validate_format(self):
        """
        Check that a freshly loaded grammar is self-consistent.

        Raises:
            GrammarFormatError: on the first violation found
        """
        grammar = self.grammar

        for terminal in sorted(grammar.terminals):
            if len(terminal) != 1:
                self._format_error(f"Each terminal must be a single character, found '{terminal}'")
            if unicodedata.category(terminal) == 'Cc':
                self._format_error(f"Invalid terminal (control character {terminal!r})")

        # Input non-terminals are single upper-case letters; longer names only
        # appear after the transformation.
        for name in sorted(grammar.nonterminals):
            if not is_upper_letter(name):
                self._format_error(f"Each non-terminal must be a single upper-case letter, found '{name}'")

        for production in grammar.productions:
            if production.lhs not in grammar.nonterminals:
                self._format_error(f"Production with undeclared left-hand side: '{production.lhs}'")
            for symbol in production.rhs:
                if isinstance(symbol, NonTerminal):
                    if symbol.name not in grammar.nonterminals:
                        self._format_error(f"Undeclared non-terminal '{symbol.name}' in production '{production}'")
                elif symbol.symbol not in grammar.terminals:
                    self._format_error(f"Undeclared terminal '{symbol.symbol}' in production '{production}'")

        app_logger.info(f"Format validation passed ({len(grammar.productions)} productions)")

    def check_preconditions(self):
        """
        Reject grammars with epsilon or unit productions.

        Epsilon productions are looked for first, then unit productions.

        Raises:
            PreconditionError: if either kind of production is present
        """
        for production in self.grammar.productions:
            if production.is_epsilon:
                self._precondition_error(f"The grammar contains an empty production: {production}")

        for production in self.grammar.productions:
            if production.is_unit:
                self._precondition_error(f"The grammar contains a unit production: {production}")

        app_logger.info("Precondition check passed: no empty or unit productions")

    @staticmethod
    def _format_error(message: str):
        app_logger.warning(f"Format error: {message}")
        raise GrammarFormatError(f"Format error: {message}")

    @staticmethod
    def _precondition_error(message: str):
        app_logger.warning(message)
        raise PreconditionError(message)


def validate_format(grammar: Grammar):
    GrammarValidator(grammar).validate_format()


def check_preconditions(grammar: Grammar):
    GrammarValidator(grammar).check_preconditions()
