"""Shared building blocks: configuration, errors, validation and dispatch."""

from foldwise.core.config import Settings, settings
from foldwise.core.errors import EmptyInputError, FoldwiseError, InvalidInputError
from foldwise.core.parallel import dispatch
from foldwise.core.types import MISSING, Box

__all__ = [
    "Settings",
    "settings",
    "FoldwiseError",
    "InvalidInputError",
    "EmptyInputError",
    "dispatch",
    "Box",
    "MISSING",
]
