"""
projterm exception classes.

This package provides all exception types used throughout projterm for
consistent error handling and reporting.
"""

from projterm.exceptions.core import (
    CommandInputTypeError,
    ProjTermError,
    RegistryError,
    UnknownCommandTypeError,
)

__all__ = [
    "ProjTermError",
    "CommandInputTypeError",
    "RegistryError",
    "UnknownCommandTypeError",
]
