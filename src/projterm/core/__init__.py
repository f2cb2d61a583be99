"""
Core value types for projterm.

This package contains the command, token and flag types shared by the
tokenizer, the command parser and command executors.
"""

from projterm.core.types import (
    CommandType,
    FlagMap,
    FlagValue,
    Token,
    TokenKind,
    get_flag,
    get_flag_count,
    has_flag,
)

__all__ = [
    "CommandType",
    "FlagMap",
    "FlagValue",
    "Token",
    "TokenKind",
    "get_flag",
    "get_flag_count",
    "has_flag",
]
