"""
Conversion to Chomsky Normal Form for grammars without epsilon and unit productions.

Two passes over the production list:

1. Terminal isolation: in every right-hand side with two or more symbols each
   terminal t is replaced by an auxiliary non-terminal C_t, and C_t -> t is
   appended to the grammar (once per terminal).
2. Binarization: every right-hand side B1 ... Bm with m >= 3 becomes the chain
   A -> B1 D1, D1 -> B2 D2, ..., D(m-2) -> B(m-1) Bm.
"""
from typing import List

from .symbols import Grammar, NonTerminal, Production, Terminal
from grammar2cnf.config import config
from grammar2cnf.logger import app_logger


class CNFTransformer:
    """Applies the two-pass CNF conversion in place."""

    def __init__(self, grammar: Grammar, terminal_prefix: str = None, chain_prefix: str = None):
        self.grammar = grammar
        self.terminal_prefix = terminal_prefix or config.get('transform.terminal_prefix', 'C')
        self.chain_prefix = chain_prefix or config.get('transform.chain_prefix', 'D')

    def transform(self) -> Grammar:
        """Convert the grammar to CNF. Preconditions must already have been checked."""
        nonterminals_before = len(self.grammar.nonterminals)
        productions_before = len(self.grammar.productions)

        self._isolate_terminals()
        self._binarize()

        app_logger.info(f"CNF transformation done: {productions_before} -> {len(self.grammar.productions)} productions, "
                        f"{len(self.grammar.nonterminals) - nonterminals_before} new non-terminals")
        return self.grammar

    def _isolate_terminals(self):
        productions = self.grammar.productions
        # C_t productions appended during the loop are never revisited
        for i in range(len(productions)):
            production = productions[i]
            if len(production.rhs) < 2:
                continue
            rhs = tuple(
                NonTerminal(self.terminal_nonterminal(sym.symbol)) if isinstance(sym, Terminal) else sym
                for sym in production.rhs
            )
            productions[i] = Production(production.lhs, rhs)

    def _binarize(self):
        result: List[Production] = []
        for production in self.grammar.productions:
            rhs = production.rhs
            if len(rhs) < 3:
                result.append(production)
                continue

            lhs = production.lhs
            for symbol in rhs[:-2]:
                chain = self.new_chain_nonterminal()
                result.append(Production(lhs, (symbol, NonTerminal(chain))))
                lhs = chain
            result.append(Production(lhs, rhs[-2:]))

        self.grammar.productions = result

    def terminal_nonterminal(self, terminal: str) -> str:
        """
        Get (or create) the auxiliary non-terminal that rewrites to a terminal.

        The name is the terminal prefix followed by the terminal, with a numeric
        suffix appended if that name is already taken.
        """
        grammar = self.grammar
        name = grammar.terminal_to_nonterminal.get(terminal)
        if name is not None:
            return name

        base = f"{self.terminal_prefix}{terminal}"
        name = base
        suffix = 1
        while name in grammar.nonterminals:
            name = f"{base}{suffix}"
            suffix += 1

        grammar.nonterminals.add(name)
        grammar.terminal_to_nonterminal[terminal] = name
        grammar.productions.append(Production(name, (Terminal(terminal),)))
        grammar.terminals.add(terminal)

        app_logger.debug(f"Isolated terminal '{terminal}' as {name}")
        return name

    def new_chain_nonterminal(self) -> str:
        """Mint a fresh binarization non-terminal (D1, D2, ...)."""
        grammar = self.grammar
        while True:
            grammar.d_counter += 1
            name = f"{self.chain_prefix}{grammar.d_counter}"
            if name not in grammar.nonterminals:
                break
        grammar.nonterminals.add(name)
        return name


def transform_to_cnf(grammar: Grammar) -> Grammar:
    """Convert a validated grammar to CNF in place and return it."""
    return CNFTransformer(grammar).transform()
