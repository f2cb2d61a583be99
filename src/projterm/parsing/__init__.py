"""
projterm command parsing components.

This package provides the tokenizer and the slash-command parser.
"""

from projterm.core.types import CommandType
from projterm.parsing.parser import (
    CommandParser,
    ParsedCommand,
    parse_command,
)
from projterm.parsing.tokenizer import tokenize

__all__ = [
    "CommandParser",
    "CommandType",
    "ParsedCommand",
    "parse_command",
    "tokenize",
]
