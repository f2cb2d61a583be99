"""
Parser for terminal slash-commands.

This module turns a command line such as ``/add todo buy milk @myproject`` into
an immutable ParsedCommand. The leading words select a command type through
the registry; the remaining words and quoted strings become positional
arguments, ``--name[=value]`` tokens become flags and the first ``@project``
token becomes the project mention.

Parsing never raises for user input. Malformed lines come back with
``is_valid=False`` and a list of error messages so the caller can render them.
"""

import logging
from itertools import takewhile
from typing import Any

from attrs import field, frozen

from projterm.commands.registry import DEFAULT_REGISTRY, CommandRegistry
from projterm.core.types import CommandType, FlagMap, Token, TokenKind
from projterm.exceptions import CommandInputTypeError
from projterm.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)


@frozen
class ParsedCommand:
    """
    Represents a parsed terminal command.

    Params:
        command_type: Type of command (ADD_TODO, VIEW_NOTES, etc.)
        command: Normalized keyword phrase that selected the type ("add todo")
        args: Positional arguments in source order
        flags: Flags given with --name or --name=value
        project_mention: Project named with @project, if any
        is_valid: True if the line had a leading slash and a known phrase
        errors: Human-readable problems, empty when valid
        raw: Original command text as written
    """

    command_type: CommandType
    command: str = ""
    args: tuple[str, ...] = field(default=(), converter=tuple)
    flags: FlagMap = field(factory=FlagMap)
    project_mention: str | None = None
    is_valid: bool = False
    errors: tuple[str, ...] = field(default=(), converter=tuple)
    raw: str = ""

    def __attrs_post_init__(self):
        """Enforce that failures are always UNKNOWN and explained."""
        if not self.is_valid:
            if self.command_type is not CommandType.UNKNOWN:
                raise ValueError(
                    f"Invalid command cannot carry type {self.command_type.value}"
                )
            if not self.errors:
                raise ValueError("Invalid command must carry at least one error")
        elif self.errors:
            raise ValueError("Valid command cannot carry errors")

    @classmethod
    def invalid(
        cls,
        raw: str,
        errors: list[str],
        args: tuple[str, ...] = (),
        flags: FlagMap | None = None,
        project_mention: str | None = None,
    ) -> "ParsedCommand":
        """Build a rejected command of type UNKNOWN."""
        return cls(
            command_type=CommandType.UNKNOWN,
            args=args,
            flags=flags if flags is not None else FlagMap(),
            project_mention=project_mention,
            is_valid=False,
            errors=errors,
            raw=raw,
        )

    def __str__(self) -> str:
        """Return a string representation of the command."""
        if not self.is_valid:
            return f"<invalid: {'; '.join(self.errors)}>"
        parts = [f"/{self.command}", *self.args]
        parts.extend(
            f"--{name}" if value is True else f"--{name}={value}"
            for name, value in self.flags.items()
        )
        if self.project_mention:
            parts.append(f"@{self.project_mention}")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "type": self.command_type.value,
            "command": self.command,
            "args": list(self.args),
            "flags": self.flags.to_dict(),
            "project_mention": self.project_mention,
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "raw": self.raw,
        }


class CommandParser:
    """Parser for terminal slash-commands."""

    COMMAND_PREFIX = "/"
    MISSING_PREFIX_ERROR = "Commands must start with /"
    NO_COMMAND_ERROR = "No command specified"
    UNKNOWN_COMMAND_ERROR = "Unknown command: {word}. Type /help for available commands."

    def __init__(self, registry: CommandRegistry | None = None):
        """
        Create a parser.

        Params:
            registry: Phrase table to dispatch on; defaults to the built-in commands
        """
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def parse(self, command: str) -> ParsedCommand:
        """
        Parse a command string into a ParsedCommand.

        Params:
            command: The raw command line, e.g. "/add todo Task 1"

        Returns:
            Parsed command; check ``is_valid`` and ``errors``

        Raises:
            CommandInputTypeError: If command is not a string
        """
        if not isinstance(command, str):
            raise CommandInputTypeError("parse", command)

        stripped = command.strip()
        if not stripped.startswith(self.COMMAND_PREFIX):
            return ParsedCommand.invalid(command, [self.MISSING_PREFIX_ERROR])

        tokens = tokenize(stripped[len(self.COMMAND_PREFIX) :])
        positional = [token for token in tokens if token.is_positional]
        flags = FlagMap.from_tokens(tokens)
        project_mention = self._first_mention(tokens)

        if not positional:
            return ParsedCommand.invalid(
                command,
                [self.NO_COMMAND_ERROR],
                flags=flags,
                project_mention=project_mention,
            )

        keywords = [
            token.value
            for token in takewhile(lambda t: t.kind is TokenKind.WORD, positional)
        ]
        match = self.registry.match(keywords)
        if match is None:
            result = ParsedCommand.invalid(
                command,
                [self.UNKNOWN_COMMAND_ERROR.format(word=positional[0].value)],
                args=tuple(token.value for token in positional),
                flags=flags,
                project_mention=project_mention,
            )
        else:
            spec, phrase, consumed = match
            result = ParsedCommand(
                command_type=spec.command_type,
                command=phrase,
                args=tuple(token.value for token in positional[consumed:]),
                flags=flags,
                project_mention=project_mention,
                is_valid=True,
                raw=command,
            )

        logger.debug(
            "Command parsed: type=%s command=%r args=%d flags=%d project=%r valid=%s",
            result.command_type.value,
            result.command,
            len(result.args),
            len(result.flags),
            result.project_mention,
            result.is_valid,
        )
        return result

    @staticmethod
    def _first_mention(tokens: list[Token]) -> str | None:
        for token in tokens:
            if token.kind is TokenKind.PROJECT_MENTION:
                return token.value
        return None


def parse_command(
    command: str, registry: CommandRegistry | None = None
) -> ParsedCommand:
    """
    Convenience function to parse a command string.

    Params:
        command: The command string to parse
        registry: Optional phrase table; defaults to the built-in commands

    Returns:
        Parsed command with validity and errors
    """
    parser = CommandParser(registry)
    return parser.parse(command)
