"""
Requirement checks for parsed commands.

The parser only decides whether a line names a known command. Whether that
command has enough to act on (arguments, a target project) depends on the
command's metadata and on the caller's context, so executors run these checks
before dispatching.
"""

from projterm.commands.registry import DEFAULT_REGISTRY, CommandRegistry
from projterm.parsing.parser import ParsedCommand, parse_command

MISSING_ARGS_ERROR = "Command requires arguments. Usage: {syntax}"
MISSING_PROJECT_ERROR = (
    "No project selected. Mention one with @project or use /swap @project"
)


def check_requirements(
    parsed: ParsedCommand,
    registry: CommandRegistry | None = None,
    *,
    has_active_project: bool = False,
) -> list[str]:
    """
    Check a parsed command against its metadata.

    Params:
        parsed: Result of parsing a command line
        registry: Registry the command was parsed with; defaults to the built-in commands
        has_active_project: Caller has a current project to fall back on

    Returns:
        Problems preventing execution; empty when the command can run.
        Invalid commands yield an empty list since their errors already
        explain the failure.
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    if not parsed.is_valid:
        return []

    spec = registry.find(parsed.command_type)
    if spec is None:
        return []

    problems = []
    if spec.requires_args and not parsed.args and not parsed.flags:
        problems.append(MISSING_ARGS_ERROR.format(syntax=spec.syntax))
    if spec.requires_project and not parsed.project_mention and not has_active_project:
        problems.append(MISSING_PROJECT_ERROR)
    return problems


def validate(command: str, registry: CommandRegistry | None = None) -> tuple[bool, list[str]]:
    """
    Validate a command string without exposing the parsed command.

    Params:
        command: Raw command line
        registry: Phrase table; defaults to the built-in commands

    Returns:
        (is_valid, errors)
    """
    parsed = parse_command(command, registry)
    return parsed.is_valid, list(parsed.errors)
