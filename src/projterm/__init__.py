"""
projterm - slash-command parsing for a project-management terminal

projterm turns lines such as ``/add todo buy milk @myproject`` into typed,
immutable commands, after screening them for shell-injection style input.
"""

from importlib.metadata import version

from projterm.core.types import CommandType, FlagMap, get_flag, get_flag_count, has_flag
from projterm.parsing.parser import CommandParser, ParsedCommand, parse_command
from projterm.pipeline import CommandPipeline, process_command
from projterm.security.validator import SecurityVerdict, validate_command

__version__ = version("projterm")

__all__ = [
    "__version__",
    "CommandParser",
    "CommandPipeline",
    "CommandType",
    "FlagMap",
    "ParsedCommand",
    "SecurityVerdict",
    "get_flag",
    "get_flag_count",
    "has_flag",
    "parse_command",
    "process_command",
    "validate_command",
]
