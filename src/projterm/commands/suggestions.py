"""
Autocomplete and "did you mean" suggestions for terminal commands.
"""

from difflib import SequenceMatcher

from projterm.commands.registry import DEFAULT_REGISTRY, CommandRegistry, normalize_phrase
from projterm.exceptions import CommandInputTypeError

DEFAULT_SUGGESTION_LIMIT = 10
SIMILARITY_CUTOFF = 0.6


def get_suggestions(
    partial: str,
    registry: CommandRegistry | None = None,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[str]:
    """
    Suggest commands completing a partially typed line.

    Params:
        partial: Text typed so far, e.g. "/ad"
        registry: Phrase table; defaults to the built-in commands
        limit: Maximum number of suggestions

    Returns:
        Lines of the form "/<phrase> - <description>", in registration order.
        Empty when the text does not start with a slash.
    """
    if not isinstance(partial, str):
        raise CommandInputTypeError("get_suggestions", partial)
    registry = registry if registry is not None else DEFAULT_REGISTRY

    stripped = partial.lstrip()
    if not stripped.startswith("/") or limit <= 0:
        return []

    prefix = normalize_phrase(stripped[1:])
    suggestions = []
    for phrase in registry.phrases():
        if not phrase.startswith(prefix):
            continue
        spec = registry.lookup(phrase)
        suggestions.append(f"/{phrase} - {spec.description}")
        if len(suggestions) >= limit:
            break
    return suggestions


def suggest_similar(
    text: str,
    registry: CommandRegistry | None = None,
    limit: int = 3,
    cutoff: float = SIMILARITY_CUTOFF,
) -> list[str]:
    """
    Find registered phrases close to a mistyped command.

    Each phrase is compared with as many leading words of the text as the
    phrase has, so "/ad todo buy milk" is compared as "ad todo" against
    "add todo".

    Params:
        text: Command line or phrase, with or without the leading slash
        registry: Phrase table; defaults to the built-in commands
        limit: Maximum number of suggestions
        cutoff: Minimum similarity ratio in [0, 1]

    Returns:
        Phrases rendered as "/<phrase>", most similar first
    """
    if not isinstance(text, str):
        raise CommandInputTypeError("suggest_similar", text)
    registry = registry if registry is not None else DEFAULT_REGISTRY

    words = normalize_phrase(text.strip().removeprefix("/")).split()
    if not words or limit <= 0:
        return []

    scored: list[tuple[float, str]] = []
    for phrase in registry.phrases():
        head = " ".join(words[: len(phrase.split())])
        score = SequenceMatcher(None, head, phrase).ratio()
        if score >= cutoff:
            scored.append((score, phrase))

    # sort is stable: equal scores keep registration order
    scored.sort(key=lambda item: item[0], reverse=True)
    return [f"/{phrase}" for _, phrase in scored[:limit]]
