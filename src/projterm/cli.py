"""Command line interface for inspecting terminal commands."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from projterm.commands.help import render_help
from projterm.commands.suggestions import get_suggestions, suggest_similar
from projterm.config import get_settings
from projterm.logging_utils import configure_logging
from projterm.parsing.parser import ParsedCommand
from projterm.pipeline import CommandPipeline

app = typer.Typer(
    name="projterm",
    help="Parse and check project terminal slash-commands.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main_callback() -> None:
    configure_logging(get_settings().log_level)


def _render_parsed(parsed: ParsedCommand) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("type", parsed.command_type.value)
    table.add_row("command", escape(parsed.command) or "-")
    table.add_row("args", escape(", ".join(repr(arg) for arg in parsed.args)) or "-")
    table.add_row(
        "flags",
        escape(", ".join(f"{name}={value!r}" for name, value in parsed.flags.items()))
        or "-",
    )
    table.add_row("project", escape(parsed.project_mention or "-"))
    table.add_row("valid", "yes" if parsed.is_valid else "no")
    return table


@app.command()
def parse(
    command: str = typer.Argument(..., help="Command line, e.g. '/add todo Task 1'"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Screen and parse a command."""
    pipeline = CommandPipeline(get_settings())
    parsed = pipeline.process(command)

    if as_json:
        typer.echo(json.dumps(parsed.to_dict(), indent=2))
    else:
        console.print(_render_parsed(parsed))
        for error in parsed.errors:
            err_console.print(f"[red]error:[/red] {escape(error)}", highlight=False)
        if (
            not parsed.is_valid
            and command.strip().startswith("/")
            and pipeline.screen(command).is_valid
        ):
            similar = suggest_similar(command, pipeline.parser.registry)
            if similar:
                err_console.print(f"Did you mean: {', '.join(similar)}?", highlight=False)

    if not parsed.is_valid:
        raise typer.Exit(1)


@app.command()
def check(
    command: str = typer.Argument(..., help="Command line to screen"),
) -> None:
    """Run only the security checks on a command."""
    verdict = CommandPipeline(get_settings()).screen(command)
    if verdict.is_valid:
        console.print("[green]ok[/green]")
        return
    err_console.print(
        f"[red]rejected[/red] ({verdict.rule.value}): {escape(verdict.reason or '')}",
        highlight=False,
    )
    raise typer.Exit(1)


@app.command()
def suggest(
    partial: str = typer.Argument(..., help="Partially typed command, e.g. '/ad'"),
) -> None:
    """List commands completing a partial line."""
    suggestions = get_suggestions(partial, limit=get_settings().suggestion_limit)
    if not suggestions:
        err_console.print("No suggestions.")
        raise typer.Exit(1)
    for line in suggestions:
        typer.echo(line)


@app.command("help")
def help_command(
    topic: Optional[list[str]] = typer.Argument(None, help="Command to describe"),
) -> None:
    """Show help for all commands or one command."""
    typer.echo(render_help(topic=" ".join(topic) if topic else None))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
