"""
Help text for terminal commands.
"""

from projterm.commands.registry import DEFAULT_REGISTRY, CommandRegistry, CommandSpec
from projterm.commands.suggestions import suggest_similar


def render_help(registry: CommandRegistry | None = None, topic: str | None = None) -> str:
    """
    Render help for all commands or for one command.

    Params:
        registry: Phrase table; defaults to the built-in commands
        topic: Command phrase or alias ("add todo", "/todos"); None for the overview

    Returns:
        Plain-text help
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    if topic is None or not topic.strip():
        return _render_overview(registry)

    words = topic.strip().removeprefix("/").split()
    spec = registry.lookup(" ".join(words))
    if spec is None:
        matched = registry.match(words)
        spec = matched[0] if matched else None
    if spec is not None:
        return _render_command(spec)

    lines = [f"No help found for '{topic.strip()}'."]
    similar = suggest_similar(topic, registry)
    if similar:
        lines.append(f"Did you mean: {', '.join(similar)}?")
    lines.append("Type /help to list all commands.")
    return "\n".join(lines)


def _render_overview(registry: CommandRegistry) -> str:
    groups: dict[str, list[CommandSpec]] = {}
    for spec in registry.specs():
        groups.setdefault(spec.category, []).append(spec)

    width = max((len(spec.syntax) for spec in registry.specs()), default=0)
    lines = ["Available commands:"]
    for category, specs in groups.items():
        lines.append("")
        lines.append(category.upper())
        for spec in specs:
            lines.append(f"  {spec.syntax.ljust(width)}  {spec.description}")
    lines.append("")
    lines.append("Type /help <command> for details.")
    return "\n".join(lines)


def _render_command(spec: CommandSpec) -> str:
    lines = [
        f"/{spec.phrase} - {spec.description}",
        f"Usage: {spec.syntax}",
    ]
    if spec.aliases:
        lines.append("Aliases: " + ", ".join(f"/{alias}" for alias in spec.aliases))
    if spec.examples:
        lines.append("Examples:")
        lines.extend(f"  {example}" for example in spec.examples)
    return "\n".join(lines)
