import os
import unittest

from grammar2cnf.grammar import (
    Grammar, GrammarFormatError, NonTerminal, PreconditionError, Production, Terminal,
    check_preconditions, load_grammar, parse_grammar, validate_format,
)

DATA_DIR = os.path.join(os.path.dirname(__file__), os.pardir, "data")


class FormatValidationTest(unittest.TestCase):
    def test_valid_grammar(self):
        validate_format(load_grammar(os.path.join(DATA_DIR, "example.gra")))

    def test_epsilon_is_well_formed(self):
        validate_format(load_grammar(os.path.join(DATA_DIR, "epsilon.gra")))

    def test_control_character_terminal(self):
        grammar = Grammar({"a", "\x07"}, {"S"}, "S", [Production("S", (Terminal("a"),))])
        with self.assertRaises(GrammarFormatError):
            validate_format(grammar)

    def test_loaded_control_character_terminal(self):
        grammar = parse_grammar("2\n\x0b\na\n1\nS\n1\nS a\n")
        with self.assertRaises(GrammarFormatError) as ctx:
            validate_format(grammar)
        self.assertIn("control character", str(ctx.exception))

    def test_multi_letter_nonterminal(self):
        grammar = parse_grammar("1\na\n2\nS\nAB\n1\nS a\n")
        with self.assertRaises(GrammarFormatError) as ctx:
            validate_format(grammar)
        self.assertIn("'AB'", str(ctx.exception))

    def test_lowercase_nonterminal(self):
        with self.assertRaises(GrammarFormatError):
            validate_format(parse_grammar("1\na\n2\nS\nx\n1\nS a\n"))

    def test_undeclared_lhs(self):
        with self.assertRaises(GrammarFormatError) as ctx:
            validate_format(parse_grammar("1\na\n1\nS\n2\nS a\nA a\n"))
        self.assertIn("'A'", str(ctx.exception))

    def test_undeclared_nonterminal_in_rhs(self):
        with self.assertRaises(GrammarFormatError) as ctx:
            validate_format(parse_grammar("1\na\n1\nS\n1\nS aB\n"))
        self.assertIn("'B'", str(ctx.exception))

    def test_undeclared_terminal_in_rhs(self):
        with self.assertRaises(GrammarFormatError) as ctx:
            validate_format(parse_grammar("1\na\n1\nS\n1\nS ab\n"))
        self.assertIn("'b'", str(ctx.exception))


class PreconditionTest(unittest.TestCase):
    def test_epsilon_production_rejected(self):
        with self.assertRaises(PreconditionError) as ctx:
            check_preconditions(load_grammar(os.path.join(DATA_DIR, "epsilon.gra")))
        self.assertIn("S -> &", str(ctx.exception))

    def test_unit_production_rejected(self):
        with self.assertRaises(PreconditionError) as ctx:
            check_preconditions(load_grammar(os.path.join(DATA_DIR, "unit.gra")))
        self.assertIn("S -> A", str(ctx.exception))

    def test_epsilon_reported_before_unit(self):
        # the unit production comes first in the list
        grammar = parse_grammar("1\na\n2\nS\nA\n3\nS A\nA a\nA &\n")
        with self.assertRaises(PreconditionError) as ctx:
            check_preconditions(grammar)
        self.assertIn("empty production", str(ctx.exception))

    def test_eligible_grammars(self):
        check_preconditions(load_grammar(os.path.join(DATA_DIR, "example.gra")))
        check_preconditions(load_grammar(os.path.join(DATA_DIR, "anbn.gra")))
        check_preconditions(Grammar(productions=[
            Production("S", (Terminal("a"),)),
            Production("S", tuple(NonTerminal(n) for n in "ABCDE")),
        ]))


if __name__ == '__main__':
    unittest.main()
