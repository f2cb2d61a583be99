"""
Shared test fixtures and utilities for the projterm test suite.
"""

import os

import pytest

from projterm.commands.registry import CommandRegistry, CommandSpec
from projterm.config import TerminalSettings
from projterm.core.types import CommandType


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file.

    Removes every PROJTERM_* variable and runs the test from an empty
    directory so no stray .env is picked up.
    """
    for name in list(os.environ):
        if name.upper().startswith("PROJTERM_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def settings(clean_env) -> TerminalSettings:
    """Default settings unaffected by the environment."""
    return TerminalSettings()


@pytest.fixture
def small_registry() -> CommandRegistry:
    """A minimal registry with a one-word, a two-word and a three-word phrase."""
    return CommandRegistry(
        [
            CommandSpec(
                CommandType.SEARCH,
                "grep",
                syntax="/grep [pattern]",
                description="Search everything",
                aliases=("look for",),
                requires_args=True,
                requires_project=False,
            ),
            CommandSpec(
                CommandType.ADD_TODO,
                "add task",
                syntax="/add task [text]",
                description="Add a task",
                requires_args=True,
                category="todos",
            ),
            CommandSpec(
                CommandType.VIEW_TODOS,
                "show all tasks",
                syntax="/show all tasks",
                description="Show every task",
                aliases=("tasks",),
                category="todos",
            ),
        ]
    )
