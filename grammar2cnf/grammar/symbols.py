"""
Symbol model: terminals, non-terminals, productions and the grammar aggregate.
"""
import string
from typing import List, Dict, Optional, Set, Tuple, Union
from dataclasses import dataclass, field


EPSILON = "&"


def is_upper_letter(ch: str) -> bool:
    """True for a single ASCII upper-case letter."""
    return len(ch) == 1 and ch in string.ascii_uppercase


def is_nonterminal_name(token: str) -> bool:
    """Non-terminal names start with an upper-case letter."""
    return bool(token) and is_upper_letter(token[0])


@dataclass(frozen=True)
class Terminal:
    """A one-character terminal symbol."""
    symbol: str
    
    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class NonTerminal:
    """A non-terminal symbol, e.g. 'S', 'Ca' or 'D3'."""
    name: str
    
    def __str__(self) -> str:
        return self.name


Symbol = Union[Terminal, NonTerminal]


@dataclass(frozen=True)
class Production:
    """A production lhs -> rhs. An empty rhs is the epsilon production."""
    lhs: str
    rhs: Tuple[Symbol, ...] = ()
    
    @property
    def is_epsilon(self) -> bool:
        return not self.rhs
    
    @property
    def is_unit(self) -> bool:
        return len(self.rhs) == 1 and isinstance(self.rhs[0], NonTerminal)
    
    def rhs_text(self) -> str:
        """Right-hand side in exchange format: '&' or the concatenated tokens."""
        if self.is_epsilon:
            return EPSILON
        return "".join(str(sym) for sym in self.rhs)
    
    def __str__(self) -> str:
        return f"{self.lhs} -> {self.rhs_text()}"


@dataclass
class Grammar:
    """A context-free grammar together with the bookkeeping used by the CNF transformation."""
    terminals: Set[str] = field(default_factory=set)
    nonterminals: Set[str] = field(default_factory=set)
    start_symbol: Optional[str] = None
    productions: List[Production] = field(default_factory=list)
    terminal_to_nonterminal: Dict[str, str] = field(default_factory=dict)
    d_counter: int = 0
    
    def clear(self):
        """Discard all state, leaving an empty grammar."""
        self.terminals.clear()
        self.nonterminals.clear()
        self.start_symbol = None
        self.productions.clear()
        self.terminal_to_nonterminal.clear()
        self.d_counter = 0
    
    def productions_for(self, lhs: str) -> List[Production]:
        return [p for p in self.productions if p.lhs == lhs]
    
    def is_cnf(self) -> bool:
        """Check that every production is A -> BC or A -> a."""
        for production in self.productions:
            rhs = production.rhs
            if len(rhs) == 1 and isinstance(rhs[0], Terminal):
                continue
            if len(rhs) == 2 and all(isinstance(sym, NonTerminal) for sym in rhs):
                continue
            return False
        return True
    
    def __str__(self) -> str:
        return "\n".join(str(p) for p in self.productions)
