import os
import tempfile
import unittest

from grammar2cnf.grammar import (
    GrammarIOError, check_preconditions, dump_grammar, load_grammar, parse_grammar,
    transform_to_cnf, validate_format, write_grammar,
)

DATA_DIR = os.path.join(os.path.dirname(__file__), os.pardir, "data")


class WriterTest(unittest.TestCase):
    def test_dump_sorted_sections(self):
        grammar = parse_grammar("2\nb\na\n2\nS\nA\n3\nS bA\nA a\nA &\n")
        self.assertEqual(dump_grammar(grammar), "2\na\nb\n2\nA\nS\n3\nS bA\nA a\nA &\n")

    def test_dump_transformed(self):
        grammar = load_grammar(os.path.join(DATA_DIR, "anbn.gra"))
        transform_to_cnf(grammar)
        self.assertEqual(
            dump_grammar(grammar),
            "2\na\nb\n4\nCa\nCb\nD1\nS\n5\nS CaD1\nD1 SCb\nS CaCb\nCa a\nCb b\n",
        )

    def test_output_reads_back_as_cnf(self):
        grammar = load_grammar(os.path.join(DATA_DIR, "example.gra"))
        validate_format(grammar)
        check_preconditions(grammar)
        transform_to_cnf(grammar)

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.gra")
            write_grammar(grammar, path)
            reloaded = load_grammar(path)

        self.assertTrue(reloaded.is_cnf())
        # the non-terminal section is sorted, so the first name read back is not S
        self.assertEqual(grammar.start_symbol, "S")
        self.assertEqual(reloaded.start_symbol, "A")
        self.assertEqual(reloaded.productions, grammar.productions)
        self.assertEqual(reloaded.nonterminals, grammar.nonterminals)
        self.assertEqual(reloaded.terminals, grammar.terminals)

    def test_unwritable_destination(self):
        grammar = parse_grammar("1\na\n1\nS\n1\nS a\n")
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(GrammarIOError):
                write_grammar(grammar, os.path.join(tmp, "missing", "out.gra"))


if __name__ == '__main__':
    unittest.main()
