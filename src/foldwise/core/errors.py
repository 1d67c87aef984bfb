"""Exception hierarchy for foldwise.

Only argument problems are raised by the package itself. Exceptions raised
inside user supplied functions (combining, mapping or walking functions) are
never caught or wrapped; they reach the caller exactly as raised.
"""

__all__ = ["FoldwiseError", "InvalidInputError", "EmptyInputError"]


class FoldwiseError(Exception):
    """Base class for errors raised by foldwise itself."""


class InvalidInputError(FoldwiseError, TypeError):
    """Malformed arguments: non-callable function, wrong arity, bad option."""


class EmptyInputError(FoldwiseError, ValueError):
    """A fold was asked to reduce an empty sequence without a seed."""
