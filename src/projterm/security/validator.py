"""
Security screening for raw terminal commands.

The validator runs before parsing and rejects lines that look like shell
injection: command separators, pipes, backticks, ``&&`` chains, ``$(``
substitution, embedded newlines and path traversal. Quoted segments are a safe
harbour, so ``--title="Task; with semicolon"`` passes. Over-long input is
rejected outright.

Suspicious-pattern screening (script tags, ``javascript:`` URLs, inline event
handlers, ``eval(`` and friends) is a separate check that looks at the whole
line, quoted or not.
"""

import re
from enum import Enum

from attrs import frozen

from projterm.exceptions import CommandInputTypeError

MAX_COMMAND_LENGTH = 500
QUOTE_CHARS = ('"', "'")
ESCAPE_CHAR = "\\"


class SecurityRule(Enum):
    """Rule that rejected a command."""

    TOO_LONG = "too_long"
    SEMICOLON = "semicolon"
    PIPE = "pipe"
    BACKTICK = "backtick"
    AND_CHAIN = "and_chain"
    COMMAND_SUBSTITUTION = "command_substitution"
    NEWLINE = "newline"
    PATH_TRAVERSAL = "path_traversal"
    SUSPICIOUS_PATTERN = "suspicious_pattern"


# Longest sequences first so "&&" is not shadowed by a shorter entry.
FORBIDDEN_SEQUENCES: tuple[tuple[str, SecurityRule, str], ...] = (
    ("../", SecurityRule.PATH_TRAVERSAL, "Path traversal sequences are not allowed"),
    ("..\\", SecurityRule.PATH_TRAVERSAL, "Path traversal sequences are not allowed"),
    ("&&", SecurityRule.AND_CHAIN, "Command chaining with '&&' is not allowed"),
    ("$(", SecurityRule.COMMAND_SUBSTITUTION, "Command substitution is not allowed"),
    (";", SecurityRule.SEMICOLON, "Semicolons are only allowed inside quotes"),
    ("|", SecurityRule.PIPE, "Pipes are only allowed inside quotes"),
    ("`", SecurityRule.BACKTICK, "Backticks are only allowed inside quotes"),
    ("\n", SecurityRule.NEWLINE, "Commands must be a single line"),
    ("\r", SecurityRule.NEWLINE, "Commands must be a single line"),
)

SUSPICIOUS_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("script tag", re.compile(r"<script", re.IGNORECASE)),
    ("javascript URL", re.compile(r"javascript:", re.IGNORECASE)),
    ("event handler", re.compile(r"(?<![\w-])on\w+\s*=", re.IGNORECASE)),
    ("eval call", re.compile(r"eval\(", re.IGNORECASE)),
    ("exec call", re.compile(r"exec\(", re.IGNORECASE)),
    ("require call", re.compile(r"require\(", re.IGNORECASE)),
    ("process access", re.compile(r"process\.", re.IGNORECASE)),
    ("prototype access", re.compile(r"__proto__", re.IGNORECASE)),
    ("constructor access", re.compile(r"constructor\[", re.IGNORECASE)),
)


@frozen
class SecurityVerdict:
    """
    Result of screening one command.

    Params:
        is_valid: True if the command may be parsed
        reason: Human-readable explanation when rejected
        rule: Machine-readable rule id when rejected
    """

    is_valid: bool
    reason: str | None = None
    rule: SecurityRule | None = None

    @classmethod
    def accept(cls) -> "SecurityVerdict":
        return cls(is_valid=True)

    @classmethod
    def reject(cls, rule: SecurityRule, reason: str) -> "SecurityVerdict":
        return cls(is_valid=False, reason=reason, rule=rule)


def validate_command(raw: str, *, max_length: int = MAX_COMMAND_LENGTH) -> SecurityVerdict:
    """
    Decide whether a raw command is safe to parse.

    Scans left to right tracking the open quote character. Forbidden
    sequences only count outside quotes. A quote left open at the end of the
    line never formed a quoted segment, so anything forbidden inside it is
    treated as unquoted. Outside quotes a backslash escapes a quote or another
    backslash, so ``\\\\"`` opens a quote exactly as it does for the
    tokenizer.

    Params:
        raw: Command text as typed by the user
        max_length: Maximum accepted length in characters

    Returns:
        Verdict with the first triggered rule, if any

    Raises:
        CommandInputTypeError: If raw is not a string
    """
    if not isinstance(raw, str):
        raise CommandInputTypeError("validate_command", raw)

    if len(raw) > max_length:
        return SecurityVerdict.reject(
            SecurityRule.TOO_LONG, f"Command too long (max {max_length} characters)"
        )

    quote: str | None = None
    pending: SecurityVerdict | None = None  # first violation inside the open quote
    pos = 0
    length = len(raw)

    while pos < length:
        char = raw[pos]
        following = raw[pos + 1] if pos + 1 < length else ""

        if quote is not None:
            if char == ESCAPE_CHAR and following in (quote, ESCAPE_CHAR):
                pos += 2
                continue
            if char == quote:
                quote = None
                pending = None
                pos += 1
                continue
            if pending is None:
                pending = _match_forbidden(raw, pos)
            pos += 1
            continue

        # same pairs the tokenizer consumes, so both agree on where quotes open
        if char == ESCAPE_CHAR and (following in QUOTE_CHARS or following == ESCAPE_CHAR):
            pos += 2
            continue
        if char in QUOTE_CHARS:
            quote = char
            pos += 1
            continue

        verdict = _match_forbidden(raw, pos)
        if verdict is not None:
            return verdict
        pos += 1

    if quote is not None and pending is not None:
        return pending
    return SecurityVerdict.accept()


def _match_forbidden(raw: str, pos: int) -> SecurityVerdict | None:
    for sequence, rule, reason in FORBIDDEN_SEQUENCES:
        if raw.startswith(sequence, pos):
            return SecurityVerdict.reject(rule, reason)
    return None


def find_suspicious_pattern(raw: str) -> str | None:
    """
    Find script-injection patterns anywhere in a command.

    Params:
        raw: Command text as typed by the user

    Returns:
        Label of the first matching pattern, or None

    Raises:
        CommandInputTypeError: If raw is not a string
    """
    if not isinstance(raw, str):
        raise CommandInputTypeError("find_suspicious_pattern", raw)
    for label, pattern in SUSPICIOUS_PATTERNS:
        if pattern.search(raw):
            return label
    return None
