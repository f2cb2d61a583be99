"""
Core value types shared by the tokenizer and the command parser.

Tokens live only for the duration of a parse. The flag container is kept on
the parsed command and handed to the command executor, so it is immutable and
remembers the order flags were written in.
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

from attrs import frozen

FlagValue = str | bool


class CommandType(Enum):
    """Kind of terminal command a parsed line resolves to."""

    # Todos
    ADD_TODO = "add_todo"
    VIEW_TODOS = "view_todos"
    EDIT_TODO = "edit_todo"
    DELETE_TODO = "delete_todo"
    COMPLETE_TODO = "complete_todo"
    ASSIGN_TODO = "assign_todo"
    SET_PRIORITY = "set_priority"
    SET_DUE_DATE = "set_due_date"
    ADD_SUBTASK = "add_subtask"

    # Notes, dev log and docs
    ADD_NOTE = "add_note"
    VIEW_NOTES = "view_notes"
    EDIT_NOTE = "edit_note"
    DELETE_NOTE = "delete_note"
    ADD_DEVLOG = "add_devlog"
    VIEW_DEVLOG = "view_devlog"
    EDIT_DEVLOG = "edit_devlog"
    DELETE_DEVLOG = "delete_devlog"
    ADD_DOC = "add_doc"
    VIEW_DOCS = "view_docs"

    # Components and their relationships
    ADD_COMPONENT = "add_component"
    VIEW_COMPONENTS = "view_components"
    EDIT_COMPONENT = "edit_component"
    DELETE_COMPONENT = "delete_component"
    ADD_RELATIONSHIP = "add_relationship"
    VIEW_RELATIONSHIPS = "view_relationships"
    DELETE_RELATIONSHIP = "delete_relationship"

    # Tech stack
    ADD_TECH = "add_tech"
    VIEW_STACK = "view_stack"
    REMOVE_TECH = "remove_tech"

    # Team
    VIEW_TEAM = "view_team"
    INVITE_MEMBER = "invite_member"
    REMOVE_MEMBER = "remove_member"

    # Project settings
    VIEW_SETTINGS = "view_settings"
    SET_NAME = "set_name"
    SET_DESCRIPTION = "set_description"
    ADD_TAG = "add_tag"
    REMOVE_TAG = "remove_tag"

    # Utility
    SWAP_PROJECT = "swap_project"
    EXPORT = "export"
    SUMMARY = "summary"
    SEARCH = "search"
    VIEW_NEWS = "view_news"
    SET_THEME = "set_theme"
    VIEW_THEMES = "view_themes"
    VIEW_NOTIFICATIONS = "view_notifications"
    CLEAR_NOTIFICATIONS = "clear_notifications"
    WIZARD_NEW = "wizard_new"
    WIZARD_SETUP = "wizard_setup"
    WIZARD_DEPLOY = "wizard_deploy"
    HELP = "help"

    UNKNOWN = "unknown"


class TokenKind(Enum):
    """Lexical category of a token."""

    WORD = "word"
    QUOTED_STRING = "quoted-string"
    FLAG = "flag"
    PROJECT_MENTION = "project-mention"


@frozen
class Token:
    """
    A single lexical unit of a command line.

    Params:
        kind: Lexical category
        value: Decoded content; the flag name for FLAG tokens
        flag_value: Decoded text after '=' for FLAG tokens, None for boolean flags
    """

    kind: TokenKind
    value: str
    flag_value: str | None = None

    @property
    def is_positional(self) -> bool:
        """Check if this token binds to a positional argument."""
        return self.kind in (TokenKind.WORD, TokenKind.QUOTED_STRING)


class FlagMap(Mapping[str, FlagValue]):
    """
    Immutable, insertion-ordered mapping of flag name to flag value.

    Boolean-present flags (``--urgent``) map to True, valued flags
    (``--priority=high``) map to their string value. Names are case-sensitive.
    A name written twice keeps its first position and its last value.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, FlagValue]] = ()):
        data: dict[str, FlagValue] = {}
        for name, value in items:
            data[name] = value
        self._items = data

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> "FlagMap":
        """Build a flag map from the FLAG tokens of a token stream."""
        return cls(
            (token.value, True if token.flag_value is None else token.flag_value)
            for token in tokens
            if token.kind is TokenKind.FLAG
        )

    def __getitem__(self, name: str) -> FlagValue:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlagMap):
            return list(self._items.items()) == list(other._items.items())
        if isinstance(other, Mapping):
            return dict(self._items) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"FlagMap({self._items!r})"

    def to_dict(self) -> dict[str, FlagValue]:
        """Return a plain dict copy, preserving order."""
        return dict(self._items)


def get_flag(flags: FlagMap, name: str) -> str | None:
    """
    Get the string value of a flag.

    Params:
        flags: Flag container of a parsed command
        name: Flag name without the leading dashes

    Returns:
        The flag value, or None when the flag is absent or boolean-present
    """
    value = flags.get(name)
    if isinstance(value, str):
        return value
    return None


def has_flag(flags: FlagMap, name: str) -> bool:
    """Check if a flag was given, with or without a value."""
    return name in flags


def get_flag_count(flags: FlagMap) -> int:
    """Count distinct flags."""
    return len(flags)
