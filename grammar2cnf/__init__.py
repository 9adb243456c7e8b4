"""
grammar2cnf - convert context-free grammars to Chomsky Normal Form.
"""
__version__ = "0.1.0"
