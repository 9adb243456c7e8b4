"""
Error taxonomy for grammar loading, validation and writing.
"""


class GrammarError(Exception):
    """Base class for every error raised by the grammar pipeline."""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GrammarIOError(GrammarError):
    """The source could not be read or the destination could not be created."""


class GrammarFormatError(GrammarError):
    """Malformed input or a grammar that is not self-consistent."""


class PreconditionError(GrammarError):
    """The grammar has epsilon or unit productions and cannot be converted."""
