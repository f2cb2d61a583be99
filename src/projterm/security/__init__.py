"""
Security screening for terminal commands.

This package provides the pre-parse checks that reject shell-injection style
input, path traversal, over-long commands and script-injection patterns.
"""

from projterm.security.validator import (
    MAX_COMMAND_LENGTH,
    SecurityRule,
    SecurityVerdict,
    find_suspicious_pattern,
    validate_command,
)

__all__ = [
    "MAX_COMMAND_LENGTH",
    "SecurityRule",
    "SecurityVerdict",
    "find_suspicious_pattern",
    "validate_command",
]
