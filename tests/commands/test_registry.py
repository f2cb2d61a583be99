"""
Tests for the command registry and the built-in command table.
"""

import pytest

from projterm.commands.registry import (
    DEFAULT_COMMANDS,
    DEFAULT_REGISTRY,
    CommandRegistry,
    CommandSpec,
    normalize_phrase,
)
from projterm.core.types import CommandType
from projterm.exceptions import RegistryError, UnknownCommandTypeError


def make_spec(command_type: CommandType, phrase: str, *aliases: str) -> CommandSpec:
    return CommandSpec(
        command_type, phrase, syntax=f"/{phrase}", description=phrase, aliases=aliases
    )


class TestNormalizePhrase:
    """Tests for phrase normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Add Todo", "add todo"),
            ("  add   todo  ", "add todo"),
            ("add\ttodo", "add todo"),
            ("?", "?"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        """Lower-cases and collapses whitespace."""
        assert normalize_phrase(raw) == expected


class TestRegistryConstruction:
    """Tests for registry validation at build time."""

    def test_duplicate_phrase_rejected(self):
        """Two commands cannot share a phrase."""
        with pytest.raises(RegistryError, match="already registered"):
            CommandRegistry(
                [
                    make_spec(CommandType.ADD_TODO, "add todo"),
                    make_spec(CommandType.ADD_NOTE, "add note", "ADD  TODO"),
                ]
            )

    def test_duplicate_type_rejected(self):
        """A command type is registered once."""
        with pytest.raises(RegistryError, match="add_todo"):
            CommandRegistry(
                [
                    make_spec(CommandType.ADD_TODO, "add todo"),
                    make_spec(CommandType.ADD_TODO, "new todo"),
                ]
            )

    def test_unknown_type_rejected(self):
        """UNKNOWN is the parser's fallback and cannot be registered."""
        with pytest.raises(RegistryError, match="UNKNOWN"):
            CommandRegistry([make_spec(CommandType.UNKNOWN, "mystery")])

    def test_empty_phrase_rejected(self):
        """Blank phrases would match nothing."""
        with pytest.raises(RegistryError, match="empty"):
            CommandRegistry([make_spec(CommandType.HELP, "   ")])

    @pytest.mark.parametrize("phrase", ["--help", "add --todo", "@project", "swap @it"])
    def test_flag_or_mention_words_rejected(self, phrase):
        """Phrase words must not look like flags or mentions."""
        with pytest.raises(RegistryError, match="flag or project mention"):
            CommandRegistry([make_spec(CommandType.HELP, phrase)])

    def test_error_carries_phrase(self):
        """RegistryError exposes the offending phrase."""
        with pytest.raises(RegistryError) as exc_info:
            CommandRegistry([make_spec(CommandType.HELP, "@bad")])

        assert exc_info.value.phrase == "@bad"

    def test_empty_registry(self):
        """An empty registry matches nothing."""
        registry = CommandRegistry([])

        assert len(registry) == 0
        assert registry.max_phrase_words == 0
        assert registry.match(["add", "todo"]) is None


class TestRegistryLookup:
    """Tests for lookup, match and accessors."""

    def test_lookup_ignores_case_and_spacing(self, small_registry):
        """Phrases are normalized before lookup."""
        spec = small_registry.lookup("  ADD   Task ")

        assert spec is not None
        assert spec.command_type is CommandType.ADD_TODO

    def test_lookup_alias(self, small_registry):
        """Aliases resolve to the same spec."""
        assert small_registry.lookup("tasks") is small_registry.lookup("show all tasks")

    def test_contains(self, small_registry):
        """Membership accepts phrases only."""
        assert "look for" in small_registry
        assert "look" not in small_registry
        assert 42 not in small_registry

    def test_max_phrase_words(self, small_registry):
        """Longest phrase has three words."""
        assert small_registry.max_phrase_words == 3

    def test_match_prefers_longest(self, small_registry):
        """The longest phrase at the head wins."""
        spec, phrase, consumed = small_registry.match(["show", "all", "tasks", "now"])

        assert spec.command_type is CommandType.VIEW_TODOS
        assert phrase == "show all tasks"
        assert consumed == 3

    def test_match_returns_normalized_phrase(self, small_registry):
        """The matched phrase is lower-case."""
        _, phrase, consumed = small_registry.match(["Look", "FOR", "bugs"])

        assert phrase == "look for"
        assert consumed == 2

    def test_match_miss(self, small_registry):
        """No phrase at the head yields None."""
        assert small_registry.match(["show", "all"]) is None
        assert small_registry.match([]) is None

    def test_get_and_find(self, small_registry):
        """get raises for unregistered types; find returns None."""
        assert small_registry.get(CommandType.SEARCH).phrase == "grep"
        assert small_registry.find(CommandType.EXPORT) is None
        with pytest.raises(UnknownCommandTypeError, match="export"):
            small_registry.get(CommandType.EXPORT)

    def test_unknown_type_error_is_key_error(self, small_registry):
        """Callers can catch the lookup failure as a KeyError."""
        with pytest.raises(KeyError):
            small_registry.get(CommandType.EXPORT)

    def test_specs_and_phrases_in_registration_order(self, small_registry):
        """Accessors keep registration order."""
        assert [spec.phrase for spec in small_registry.specs()] == [
            "grep",
            "add task",
            "show all tasks",
        ]
        assert small_registry.phrases() == [
            "grep",
            "look for",
            "add task",
            "show all tasks",
            "tasks",
        ]

    def test_spec_phrases_property(self):
        """Canonical phrase first, aliases after, all normalized."""
        spec = make_spec(CommandType.HELP, "Help", "?", "Commands")

        assert spec.phrases == ("help", "?", "commands")


class TestDefaultCommands:
    """Tests for the built-in command table."""

    def test_every_type_but_unknown_is_registered(self):
        """All dispatchable command types have metadata."""
        registered = {spec.command_type for spec in DEFAULT_COMMANDS}

        assert registered == set(CommandType) - {CommandType.UNKNOWN}

    def test_every_spec_is_documented(self):
        """Help needs syntax, description and at least one example."""
        for spec in DEFAULT_REGISTRY.specs():
            assert spec.syntax.startswith("/"), spec.phrase
            assert spec.description, spec.phrase
            assert spec.examples, spec.phrase

    @pytest.mark.parametrize(
        "phrase,expected",
        [
            ("todo", CommandType.ADD_TODO),
            ("add-todo", CommandType.ADD_TODO),
            ("list todos", CommandType.VIEW_TODOS),
            ("done", CommandType.COMPLETE_TODO),
            ("set due date", CommandType.SET_DUE_DATE),
            ("add tech", CommandType.ADD_TECH),
            ("add package", CommandType.ADD_TECH),
            ("invite", CommandType.INVITE_MEMBER),
            ("rename", CommandType.SET_NAME),
            ("switch", CommandType.SWAP_PROJECT),
            ("download", CommandType.EXPORT),
            ("find", CommandType.SEARCH),
            ("new", CommandType.WIZARD_NEW),
            ("setup", CommandType.WIZARD_SETUP),
            ("wizard-setup", CommandType.WIZARD_SETUP),
            ("deploy-wizard", CommandType.WIZARD_DEPLOY),
            ("?", CommandType.HELP),
        ],
    )
    def test_aliases(self, phrase, expected):
        """Common aliases resolve to their commands."""
        assert DEFAULT_REGISTRY.lookup(phrase).command_type is expected

    def test_global_commands_need_no_project(self):
        """Account-level commands do not require a project."""
        for command_type in (
            CommandType.HELP,
            CommandType.SEARCH,
            CommandType.WIZARD_NEW,
            CommandType.VIEW_NOTIFICATIONS,
            CommandType.SET_THEME,
        ):
            assert not DEFAULT_REGISTRY.get(command_type).requires_project

    def test_longest_phrase(self):
        """'set due date' is the longest built-in phrase."""
        assert DEFAULT_REGISTRY.max_phrase_words == 3
