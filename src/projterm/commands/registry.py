"""
Command registry: the phrase table the parser dispatches on.

A registry maps keyword phrases ("add todo", "todos", "?") to command specs.
It is immutable once built and is handed to the parser, so tests and callers
can parse against a custom command set without touching module state.
"""

from collections.abc import Iterable, Sequence

from attrs import field, frozen

from projterm.core.types import CommandType
from projterm.exceptions import RegistryError, UnknownCommandTypeError

RESERVED_PREFIXES = ("--", "@")


def normalize_phrase(phrase: str) -> str:
    """Lower-case a phrase and collapse its whitespace."""
    return " ".join(phrase.lower().split())


@frozen
class CommandSpec:
    """
    Metadata for one terminal command.

    Params:
        command_type: Command type the phrase resolves to
        phrase: Canonical keyword phrase, e.g. "add todo"
        syntax: Usage line shown in help and error messages
        description: One-line summary
        examples: Example invocations
        aliases: Additional phrases resolving to the same command
        requires_args: Command needs positional arguments or flags to act
        requires_project: Command acts on a project (mention or active one)
        category: Grouping used by help output
    """

    command_type: CommandType
    phrase: str
    syntax: str
    description: str
    examples: tuple[str, ...] = field(default=(), converter=tuple)
    aliases: tuple[str, ...] = field(default=(), converter=tuple)
    requires_args: bool = False
    requires_project: bool = True
    category: str = "general"

    @property
    def phrases(self) -> tuple[str, ...]:
        """Canonical phrase followed by aliases, normalized."""
        return tuple(normalize_phrase(p) for p in (self.phrase, *self.aliases))


class CommandRegistry:
    """Immutable lookup from keyword phrase to command spec."""

    def __init__(self, specs: Iterable[CommandSpec]):
        """
        Build the phrase table.

        Params:
            specs: Command specs, one per command type

        Raises:
            RegistryError: On duplicate, empty or flag/mention-like phrases,
                or a spec for the UNKNOWN type
        """
        by_phrase: dict[str, CommandSpec] = {}
        by_type: dict[CommandType, CommandSpec] = {}

        for spec in specs:
            if spec.command_type is CommandType.UNKNOWN:
                raise RegistryError(spec.phrase, "UNKNOWN cannot be registered")
            if spec.command_type in by_type:
                raise RegistryError(
                    spec.phrase, f"type {spec.command_type.value} is already registered"
                )
            for phrase in spec.phrases:
                self._check_phrase(phrase)
                if phrase in by_phrase:
                    raise RegistryError(
                        phrase,
                        f"already registered for {by_phrase[phrase].command_type.value}",
                    )
                by_phrase[phrase] = spec
            by_type[spec.command_type] = spec

        self._by_phrase = by_phrase
        self._by_type = by_type
        self._max_phrase_words = max(
            (len(phrase.split()) for phrase in by_phrase), default=0
        )

    @staticmethod
    def _check_phrase(phrase: str) -> None:
        if not phrase:
            raise RegistryError(phrase, "phrase is empty")
        for word in phrase.split():
            if word.startswith(RESERVED_PREFIXES):
                raise RegistryError(
                    phrase, f"word '{word}' would be read as a flag or project mention"
                )

    @property
    def max_phrase_words(self) -> int:
        """Word count of the longest registered phrase."""
        return self._max_phrase_words

    def __len__(self) -> int:
        return len(self._by_type)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and normalize_phrase(phrase) in self._by_phrase

    def lookup(self, phrase: str) -> CommandSpec | None:
        """Find the spec registered for a phrase, ignoring case and spacing."""
        return self._by_phrase.get(normalize_phrase(phrase))

    def get(self, command_type: CommandType) -> CommandSpec:
        """
        Get the spec of a command type.

        Raises:
            UnknownCommandTypeError: If the type has no spec in this registry
        """
        try:
            return self._by_type[command_type]
        except KeyError:
            raise UnknownCommandTypeError(command_type.value) from None

    def find(self, command_type: CommandType) -> CommandSpec | None:
        """Get the spec of a command type, or None."""
        return self._by_type.get(command_type)

    def specs(self) -> list[CommandSpec]:
        """All specs in registration order."""
        return list(self._by_type.values())

    def phrases(self) -> list[str]:
        """All phrases (canonical and aliases) in registration order."""
        return list(self._by_phrase)

    def match(self, words: Sequence[str]) -> tuple[CommandSpec, str, int] | None:
        """
        Match the longest registered phrase at the head of a word sequence.

        Params:
            words: Leading keyword candidates, in order

        Returns:
            (spec, normalized phrase, number of words consumed), or None
        """
        longest = min(len(words), self._max_phrase_words)
        for size in range(longest, 0, -1):
            phrase = normalize_phrase(" ".join(words[:size]))
            spec = self._by_phrase.get(phrase)
            if spec is not None:
                return spec, phrase, size
        return None


_TODO = "todos"
_CONTENT = "content"
_COMPONENTS = "components"
_STACK = "stack"
_TEAM = "team"
_SETTINGS = "settings"
_UTILITY = "utility"

DEFAULT_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        CommandType.ADD_TODO,
        "add todo",
        syntax="/add todo [text] [--priority=low|medium|high] [--due=date] [@project]",
        description="Create a new todo item",
        examples=(
            "/add todo fix authentication bug @myproject",
            "/todo implement user dashboard",
            '/add todo --title="Review pull request" --priority=high',
        ),
        aliases=("add-todo", "todo"),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.VIEW_TODOS,
        "view todos",
        syntax="/view todos [@project]",
        description="List all todos in a project",
        examples=("/view todos @myproject", "/todos", "/list todos @backend"),
        aliases=("view-todos", "todos", "list todos"),
        category=_TODO,
    ),
    CommandSpec(
        CommandType.EDIT_TODO,
        "edit todo",
        syntax="/edit todo [#|text] [--content=text] [--status=status] [@project]",
        description="Edit an existing todo",
        examples=("/edit todo 1 --content=\"updated text\"", "/edit todo 2 --status=in_progress"),
        aliases=("edit-todo",),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.DELETE_TODO,
        "delete todo",
        syntax="/delete todo [#|text] [--confirm] [@project]",
        description="Delete a todo",
        examples=("/delete todo 1", "/delete todo 3 --confirm"),
        aliases=("delete-todo", "remove todo"),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.COMPLETE_TODO,
        "complete todo",
        syntax="/complete todo [#|text] [@project]",
        description="Mark a todo as completed",
        examples=("/complete todo 1", "/done 2"),
        aliases=("complete-todo", "done"),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.ASSIGN_TODO,
        "assign todo",
        syntax="/assign todo [#|text] [email] [@project]",
        description="Assign a todo to a team member",
        examples=("/assign todo 1 alice@example.com",),
        aliases=("assign-todo", "assign"),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.SET_PRIORITY,
        "set priority",
        syntax="/set priority [#|text] [low|medium|high] [@project]",
        description="Set the priority of a todo",
        examples=("/set priority 1 high",),
        aliases=("priority",),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.SET_DUE_DATE,
        "set due",
        syntax="/set due [#|text] [date] [@project]",
        description="Set the due date of a todo",
        examples=("/set due 1 2025-12-31", "/set due date 2 tomorrow"),
        aliases=("set due date", "due"),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.ADD_SUBTASK,
        "add subtask",
        syntax='/add subtask "[parent todo]" "[subtask text]" [@project]',
        description="Add a subtask under an existing todo",
        examples=('/add subtask 1 "write migration"',),
        aliases=("add-subtask", "subtask"),
        requires_args=True,
        category=_TODO,
    ),
    CommandSpec(
        CommandType.ADD_NOTE,
        "add note",
        syntax="/add note [text] [--title=title] [@project]",
        description="Create a new note",
        examples=(
            "/add note API architecture decisions @backend",
            "/note meeting notes from standup",
        ),
        aliases=("add-note", "note"),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.VIEW_NOTES,
        "view notes",
        syntax="/view notes [@project]",
        description="List all notes in a project",
        examples=("/view notes @myproject", "/notes", "/list notes @frontend"),
        aliases=("view-notes", "notes", "list notes"),
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.EDIT_NOTE,
        "edit note",
        syntax="/edit note [#|title] [--title=title] [--content=text] [@project]",
        description="Edit an existing note",
        examples=('/edit note 1 --title="Sprint notes"',),
        aliases=("edit-note",),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.DELETE_NOTE,
        "delete note",
        syntax="/delete note [#|title] [--confirm] [@project]",
        description="Delete a note",
        examples=("/delete note 2",),
        aliases=("delete-note", "remove note"),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.ADD_DEVLOG,
        "add devlog",
        syntax="/add devlog [text] [@project]",
        description="Create a new dev log entry",
        examples=(
            "/add devlog fixed memory leak in user service @backend",
            "/devlog optimized database queries",
        ),
        aliases=("add-devlog", "devlog"),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.VIEW_DEVLOG,
        "view devlog",
        syntax="/view devlog [@project]",
        description="List dev log entries",
        examples=("/view devlog @myproject", "/list devlog @backend"),
        aliases=("view-devlog", "list devlog"),
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.EDIT_DEVLOG,
        "edit devlog",
        syntax="/edit devlog [#] [--content=text] [@project]",
        description="Edit a dev log entry",
        examples=('/edit devlog 1 --content="fixed the cache key"',),
        aliases=("edit-devlog",),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.DELETE_DEVLOG,
        "delete devlog",
        syntax="/delete devlog [#] [--confirm] [@project]",
        description="Delete a dev log entry",
        examples=("/delete devlog 1",),
        aliases=("delete-devlog",),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.ADD_DOC,
        "add doc",
        syntax="/add doc [type] [title] [--content=text] [@project]",
        description="Create a documentation entry",
        examples=('/add doc api "Auth endpoints" --content="POST /login"',),
        aliases=("add-doc",),
        requires_args=True,
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.VIEW_DOCS,
        "view docs",
        syntax="/view docs [@project]",
        description="List documentation",
        examples=("/view docs @myproject", "/docs", "/list docs @api"),
        aliases=("view-docs", "docs", "list docs"),
        category=_CONTENT,
    ),
    CommandSpec(
        CommandType.ADD_COMPONENT,
        "add component",
        syntax="/add component --feature=[feature] --category=[category] --type=[type] --title=[title] [@project]",
        description="Create a component in a feature",
        examples=(
            '/add component --feature=auth --category=backend --type=service --title="Login API"',
        ),
        aliases=("add-component",),
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.VIEW_COMPONENTS,
        "view components",
        syntax="/view components [@project]",
        description="List components grouped by feature",
        examples=("/view components @myproject", "/components"),
        aliases=("view-components", "components", "list components"),
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.EDIT_COMPONENT,
        "edit component",
        syntax="/edit component [feature] [title] [--field=value] [@project]",
        description="Edit a component",
        examples=('/edit component auth "Login API" --content="JWT based"',),
        aliases=("edit-component",),
        requires_args=True,
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.DELETE_COMPONENT,
        "delete component",
        syntax="/delete component [feature] [title] [--confirm] [@project]",
        description="Delete a component",
        examples=('/delete component auth "Login API" --confirm',),
        aliases=("delete-component",),
        requires_args=True,
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.ADD_RELATIONSHIP,
        "add relationship",
        syntax='/add relationship "[source]" "[target]" [type] [@project]',
        description="Link two components",
        examples=('/add relationship "Login API" "User Model" uses',),
        aliases=("add-relationship",),
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.VIEW_RELATIONSHIPS,
        "view relationships",
        syntax='/view relationships "[component]" [@project]',
        description="List relationships of a component",
        examples=('/view relationships "Login API"',),
        aliases=("view-relationships", "relationships"),
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.DELETE_RELATIONSHIP,
        "delete relationship",
        syntax='/delete relationship "[source]" "[target]" [@project]',
        description="Remove a relationship between two components",
        examples=('/delete relationship "Login API" "User Model"',),
        aliases=("delete-relationship", "remove relationship"),
        requires_args=True,
        category=_COMPONENTS,
    ),
    CommandSpec(
        CommandType.ADD_TECH,
        "add stack",
        syntax="/add stack [name] [--version=version] [--category=category] [@project]",
        description="Add a technology or package to the stack",
        examples=("/add stack react --version=18.2.0", "/add tech postgres"),
        aliases=("add tech", "add-tech", "add package"),
        requires_args=True,
        category=_STACK,
    ),
    CommandSpec(
        CommandType.VIEW_STACK,
        "view stack",
        syntax="/view stack [@project]",
        description="Show the project's tech stack",
        examples=("/view stack @myproject", "/stack"),
        aliases=("view-stack", "stack", "list stack"),
        category=_STACK,
    ),
    CommandSpec(
        CommandType.REMOVE_TECH,
        "remove stack",
        syntax="/remove stack [name] [@project]",
        description="Remove a technology or package from the stack",
        examples=("/remove stack jquery",),
        aliases=("remove tech", "remove-tech", "remove package"),
        requires_args=True,
        category=_STACK,
    ),
    CommandSpec(
        CommandType.VIEW_TEAM,
        "view team",
        syntax="/view team [@project]",
        description="List team members",
        examples=("/view team @myproject", "/team"),
        aliases=("view-team", "team", "list team"),
        category=_TEAM,
    ),
    CommandSpec(
        CommandType.INVITE_MEMBER,
        "invite member",
        syntax="/invite [email] [--role=editor|viewer] [@project]",
        description="Invite a user to the project",
        examples=("/invite user@example.com --role=editor @myproject",),
        aliases=("invite", "invite-member"),
        requires_args=True,
        category=_TEAM,
    ),
    CommandSpec(
        CommandType.REMOVE_MEMBER,
        "remove member",
        syntax="/remove member [email] [@project]",
        description="Remove a member from the project",
        examples=("/remove member user@example.com",),
        aliases=("remove-member",),
        requires_args=True,
        category=_TEAM,
    ),
    CommandSpec(
        CommandType.VIEW_SETTINGS,
        "view settings",
        syntax="/view settings [@project]",
        description="Show project settings",
        examples=("/view settings @myproject", "/settings"),
        aliases=("view-settings", "settings"),
        category=_SETTINGS,
    ),
    CommandSpec(
        CommandType.SET_NAME,
        "set name",
        syntax="/set name [new name] [@project]",
        description="Rename the project",
        examples=('/set name "New Project Name"',),
        aliases=("set-name", "rename"),
        requires_args=True,
        category=_SETTINGS,
    ),
    CommandSpec(
        CommandType.SET_DESCRIPTION,
        "set description",
        syntax="/set description [text] [@project]",
        description="Change the project description",
        examples=('/set description "Internal tooling for the ops team"',),
        aliases=("set-description",),
        requires_args=True,
        category=_SETTINGS,
    ),
    CommandSpec(
        CommandType.ADD_TAG,
        "add tag",
        syntax="/add tag [tag] [@project]",
        description="Tag the project",
        examples=("/add tag react",),
        aliases=("add-tag", "tag"),
        requires_args=True,
        category=_SETTINGS,
    ),
    CommandSpec(
        CommandType.REMOVE_TAG,
        "remove tag",
        syntax="/remove tag [tag] [@project]",
        description="Remove a tag from the project",
        examples=("/remove tag legacy",),
        aliases=("remove-tag",),
        requires_args=True,
        category=_SETTINGS,
    ),
    CommandSpec(
        CommandType.SWAP_PROJECT,
        "swap project",
        syntax="/swap [@project]",
        description="Switch to a different project",
        examples=("/swap @frontend", "/switch-project @backend"),
        aliases=("swap", "swap-project", "switch", "switch-project", "project"),
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.EXPORT,
        "export",
        syntax="/export [@project]",
        description="Export project data",
        examples=("/export @myproject", "/download @frontend"),
        aliases=("download",),
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.SUMMARY,
        "summary",
        syntax="/summary [markdown|json|prompt|text] [@project]",
        description="Summarize a project",
        examples=("/summary", "/summary markdown @myproject"),
        aliases=("summarize",),
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.SEARCH,
        "search",
        syntax="/search [query] [@project]",
        description="Search todos, notes and components",
        examples=("/search authentication", '/search "rate limit" @backend'),
        aliases=("find",),
        requires_args=True,
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.VIEW_NEWS,
        "view news",
        syntax="/view news",
        description="Show recent product updates",
        examples=("/news",),
        aliases=("news", "view-news"),
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.SET_THEME,
        "set theme",
        syntax="/set theme [theme]",
        description="Change the interface theme",
        examples=("/set theme dark",),
        aliases=("set-theme", "theme"),
        requires_args=True,
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.VIEW_THEMES,
        "view themes",
        syntax="/view themes",
        description="List available themes",
        examples=("/themes",),
        aliases=("view-themes", "themes"),
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.VIEW_NOTIFICATIONS,
        "view notifications",
        syntax="/view notifications [--unread]",
        description="List your notifications",
        examples=("/notifications", "/view notifications --unread"),
        aliases=("view-notifications", "notifications"),
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.CLEAR_NOTIFICATIONS,
        "clear notifications",
        syntax="/clear notifications",
        description="Mark all notifications as read",
        examples=("/clear notifications",),
        aliases=("clear-notifications",),
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.WIZARD_NEW,
        "wizard new",
        syntax="/wizard new",
        description="Start the interactive wizard to create a new project",
        examples=("/wizard new", "/new"),
        aliases=("wizard-new", "new", "create"),
        requires_project=False,
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.WIZARD_SETUP,
        "wizard setup",
        syntax="/wizard setup [@project]",
        description="Start the interactive wizard to set up a project",
        examples=("/wizard setup @myproject", "/setup", "/wizard-setup @frontend"),
        aliases=("wizard-setup", "setup"),
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.WIZARD_DEPLOY,
        "wizard deploy",
        syntax="/wizard deploy [@project]",
        description="Start the interactive deployment wizard",
        examples=("/wizard deploy @myproject", "/deploy-wizard", "/wizard-deploy @backend"),
        aliases=("wizard-deploy", "deploy-wizard"),
        category=_UTILITY,
    ),
    CommandSpec(
        CommandType.HELP,
        "help",
        syntax="/help [command]",
        description="Show help for all commands or a specific command",
        examples=("/help", "/help add todo", "/?"),
        aliases=("?", "commands"),
        requires_project=False,
        category=_UTILITY,
    ),
)

DEFAULT_REGISTRY = CommandRegistry(DEFAULT_COMMANDS)
