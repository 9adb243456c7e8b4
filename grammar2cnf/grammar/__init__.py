"""
Grammar package initialization.
"""
from .errors import GrammarError, GrammarIOError, GrammarFormatError, PreconditionError
from .symbols import EPSILON, Grammar, NonTerminal, Production, Symbol, Terminal
from .loader import GrammarLoader, load_grammar, parse_grammar
from .validator import GrammarValidator, check_preconditions, validate_format
from .transformer import CNFTransformer, transform_to_cnf
from .reachability import ReachabilityAnalyzer, declared_nonterminals, reachable_nonterminals, unreachable_nonterminals
from .writer import GrammarWriter, dump_grammar, write_grammar

__all__ = [
    'GrammarError', 'GrammarIOError', 'GrammarFormatError', 'PreconditionError',
    'EPSILON', 'Grammar', 'NonTerminal', 'Production', 'Symbol', 'Terminal',
    'GrammarLoader', 'load_grammar', 'parse_grammar',
    'GrammarValidator', 'check_preconditions', 'validate_format',
    'CNFTransformer', 'transform_to_cnf',
    'ReachabilityAnalyzer', 'declared_nonterminals', 'reachable_nonterminals', 'unreachable_nonterminals',
    'GrammarWriter', 'dump_grammar', 'write_grammar',
]
