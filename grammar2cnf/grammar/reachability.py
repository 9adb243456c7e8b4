"""
Reachability of single-letter non-terminals from the start symbol.
"""
from collections import deque
from typing import Set

from .symbols import Grammar, NonTerminal, is_upper_letter


class ReachabilityAnalyzer:
    """Read-only queries comparing declared and reachable non-terminals."""

    def __init__(self, grammar: Grammar):
        self.grammar = grammar

    def reachable(self) -> Set[str]:
        """
        Breadth-first closure from the start symbol.

        Only single-letter non-terminals are followed and recorded, so names
        introduced by the CNF transformation (Ca, D1, ...) are not traversed.
        """
        start = self.grammar.start_symbol
        if not start or not is_upper_letter(start):
            return set()

        reachable = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for production in self.grammar.productions_for(current):
                for symbol in production.rhs:
                    if isinstance(symbol, NonTerminal) and is_upper_letter(symbol.name) \
                            and symbol.name not in reachable:
                        reachable.add(symbol.name)
                        queue.append(symbol.name)
        return reachable

    def declared(self) -> Set[str]:
        """Single-letter names in the non-terminal set."""
        return {name for name in self.grammar.nonterminals if is_upper_letter(name)}

    def unreachable(self) -> Set[str]:
        return self.declared() - self.reachable()


def reachable_nonterminals(grammar: Grammar) -> Set[str]:
    return ReachabilityAnalyzer(grammar).reachable()


def declared_nonterminals(grammar: Grammar) -> Set[str]:
    return ReachabilityAnalyzer(grammar).declared()


def unreachable_nonterminals(grammar: Grammar) -> Set[str]:
    return ReachabilityAnalyzer(grammar).unreachable()
