"""
Command pipeline: security screening followed by parsing.

This is the entry point request handlers call with the text a user typed. A
security rejection short-circuits before the parser runs and comes back as an
invalid UNKNOWN command, so callers handle every outcome the same way.
"""

import logging

from projterm.commands.registry import CommandRegistry
from projterm.config import TerminalSettings
from projterm.exceptions import CommandInputTypeError
from projterm.parsing.parser import CommandParser, ParsedCommand
from projterm.security.validator import (
    SecurityRule,
    SecurityVerdict,
    find_suspicious_pattern,
    validate_command,
)

logger = logging.getLogger(__name__)

SUSPICIOUS_PATTERN_ERROR = "Invalid command format detected"


class CommandPipeline:
    """Screens and parses raw terminal commands."""

    def __init__(
        self,
        settings: TerminalSettings | None = None,
        registry: CommandRegistry | None = None,
    ):
        """
        Create a pipeline.

        Params:
            settings: Limits and audit options; defaults to TerminalSettings()
            registry: Phrase table for the parser; defaults to the built-in commands
        """
        self.settings = settings if settings is not None else TerminalSettings()
        self.parser = CommandParser(registry)

    def screen(self, raw: str) -> SecurityVerdict:
        """Run the security checks only."""
        if not isinstance(raw, str):
            raise CommandInputTypeError("screen", raw)

        verdict = validate_command(raw, max_length=self.settings.max_command_length)
        if not verdict.is_valid:
            return verdict

        if self.settings.block_suspicious_patterns:
            label = find_suspicious_pattern(raw)
            if label is not None:
                logger.debug("Suspicious pattern matched: %s", label)
                return SecurityVerdict.reject(
                    SecurityRule.SUSPICIOUS_PATTERN, SUSPICIOUS_PATTERN_ERROR
                )
        return verdict

    def process(self, raw: str) -> ParsedCommand:
        """
        Screen a raw command and parse it if it passes.

        Params:
            raw: Command text as typed by the user

        Returns:
            The parsed command, or an invalid UNKNOWN command carrying the
            security rejection reason

        Raises:
            CommandInputTypeError: If raw is not a string
        """
        if not isinstance(raw, str):
            raise CommandInputTypeError("process", raw)

        preview = self._preview(raw)
        verdict = self.screen(raw)
        if not verdict.is_valid:
            logger.warning(
                "Terminal command rejected: rule=%s command=%r",
                verdict.rule.value if verdict.rule else None,
                preview,
            )
            return ParsedCommand.invalid(raw, [verdict.reason or "Command rejected"])

        parsed = self.parser.parse(raw)
        logger.info(
            "Terminal command: type=%s valid=%s command=%r",
            parsed.command_type.value,
            parsed.is_valid,
            preview,
        )
        return parsed

    def _preview(self, raw: str) -> str:
        return raw[: self.settings.audit_preview_length]


def process_command(raw: str, settings: TerminalSettings | None = None) -> ParsedCommand:
    """Convenience function to screen and parse one command."""
    return CommandPipeline(settings).process(raw)
