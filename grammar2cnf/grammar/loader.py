"""
Grammar loader for the line-oriented exchange format.

The format has three sections, each a count followed by that many lines:

    <n_terminals>
    <terminal>            one printable character per line
    <n_nonterminals>
    <nonterminal>         the first one is the start symbol
    <n_productions>
    <LHS> <RHS>           RHS is '&' or the concatenated symbols

Blank lines are skipped anywhere.
"""
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set, Tuple, Union

from .errors import GrammarFormatError, GrammarIOError
from .symbols import EPSILON, Grammar, NonTerminal, Production, Symbol, Terminal, is_upper_letter
from grammar2cnf.config import config
from grammar2cnf.logger import app_logger

# Only these are trimmed; other control characters are terminal candidates
LINE_BLANKS = " \t\r\n"


class GrammarLoader:
    """Parses the exchange format into a Grammar."""

    def __init__(self, encoding: str = None):
        self.encoding = encoding or config.get('io.encoding', 'utf-8')

    def load(self, path: Union[str, Path], grammar: Optional[Grammar] = None) -> Grammar:
        """
        Load a grammar from a file.

        Args:
            path: File in exchange format
            grammar: Grammar to re-populate; a new one is created when omitted

        Returns:
            The populated grammar
        """
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeDecodeError) as e:
            app_logger.warning(f"Cannot read grammar file {path}: {e}")
            raise GrammarIOError(f"Cannot open input file: {path}") from e

        grammar = self.parse(lines, grammar)
        app_logger.info(f"Loaded grammar from {path}: {len(grammar.terminals)} terminals, "
                        f"{len(grammar.nonterminals)} non-terminals, {len(grammar.productions)} productions")
        return grammar

    def parse(self, lines: Iterable[str], grammar: Optional[Grammar] = None) -> Grammar:
        """Parse exchange-format lines into a grammar, discarding any previous state."""
        if grammar is None:
            grammar = Grammar()
        grammar.clear()

        stream = iter(lines)

        # 1) terminals
        n_terminals = self._read_count(stream, "terminals")
        for line in self._read_items(stream, n_terminals, "terminal symbols"):
            if len(line) != 1:
                self._fail(f"Each terminal must be a single character (line: '{line}')")
            grammar.terminals.add(line)

        # 2) non-terminals
        n_nonterminals = self._read_count(stream, "non-terminals")
        names = self._read_items(stream, n_nonterminals, "non-terminal symbols")
        if not names:
            self._fail("No non-terminals defined")
        grammar.start_symbol = names[0]
        grammar.nonterminals.update(names)

        # 3) productions
        n_productions = self._read_count(stream, "productions")
        for line in self._read_items(stream, n_productions, "productions"):
            fields = line.split()
            if len(fields) < 2:
                self._fail(f"Production is missing its right-hand side: '{line}'")
            if len(fields) > 2:
                app_logger.warning(f"Ignoring trailing fields in production: '{line}'")
            lhs, rhs = fields[0], fields[1]
            grammar.productions.append(Production(lhs, self.tokenize(rhs, grammar.nonterminals)))

        app_logger.debug(f"Start symbol: {grammar.start_symbol}")
        return grammar

    @staticmethod
    def tokenize(rhs: str, nonterminals: Set[str]) -> Tuple[Symbol, ...]:
        """
        Split a right-hand side into symbols.

        '&' alone is epsilon. At an upper-case character the longest declared
        non-terminal starting there is taken, otherwise the character itself;
        every other character is a terminal.
        """
        if rhs == EPSILON:
            return ()

        longest = max((len(name) for name in nonterminals), default=1)
        symbols: List[Symbol] = []
        idx = 0
        while idx < len(rhs):
            ch = rhs[idx]
            if not is_upper_letter(ch):
                symbols.append(Terminal(ch))
                idx += 1
                continue

            size = 1
            for length in range(min(longest, len(rhs) - idx), 1, -1):
                if rhs[idx:idx + length] in nonterminals:
                    size = length
                    break
            symbols.append(NonTerminal(rhs[idx:idx + size]))
            idx += size
        return tuple(symbols)

    def _read_count(self, stream: Iterator[str], what: str) -> int:
        for raw in stream:
            line = raw.strip(LINE_BLANKS)
            if not line:
                continue
            try:
                count = int(line.split()[0])
            except (ValueError, IndexError):
                self._fail(f"Expected the number of {what}, found '{line}'")
            if count < 0:
                self._fail(f"Negative number of {what}: {count}")
            return count
        self._fail(f"Unexpected end of file while reading the number of {what}")

    def _read_items(self, stream: Iterator[str], count: int, what: str) -> List[str]:
        items = []
        while len(items) < count:
            raw = next(stream, None)
            if raw is None:
                self._fail(f"Missing {what}: expected {count}, found {len(items)}")
            line = raw.strip(LINE_BLANKS)
            if line:
                items.append(line)
        return items

    @staticmethod
    def _fail(message: str):
        app_logger.warning(f"Malformed input: {message}")
        raise GrammarFormatError(f"Malformed input: {message}")


def load_grammar(path: Union[str, Path], grammar: Optional[Grammar] = None) -> Grammar:
    """Load a grammar file in exchange format."""
    return GrammarLoader().load(path, grammar)


def parse_grammar(text: str) -> Grammar:
    """Parse a grammar given as exchange-format text."""
    return GrammarLoader().parse(text.split("\n"))
