"""Interactive mood-logging session for MoodLog CLI.

Reads one command per line, applies it through the controller and redraws.
Numbers in commands refer to the position shown in the mood table.
"""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from moodlog.cli.render import render_history, render_session, render_stats
from moodlog.config import AppConfig
from moodlog.core.controller import MoodController
from moodlog.errors import MoodlogError

logger = logging.getLogger(__name__)

console = Console()

HELP_TEXT = """[bold]Commands[/bold]
  select N                         Select mood N (again to deselect)
  fav N                            Toggle favorite on mood N
  delete N                         Delete custom mood N
  add LABEL | DESCRIPTION [| TIP]  Add a custom mood
  note TEXT                        Draft a note for the selected mood
  save [TEXT]                      Log the selected mood with the note
  clear                            Clear selection and reset streak
  search [TEXT]                    Filter moods (no text clears)
  history                          Show logged moods
  stats                            Show mood analytics
  help                             Show this help
  quit                             End the session"""

ALIASES = {"exit": "quit", "q": "quit", "s": "select", "favorite": "fav", "rm": "delete", "?": "help"}


def parse_command(line: str) -> tuple[str, str]:
    """Split an input line into a command name and its raw argument text.

    Returns:
        (command, rest). Command is lower-cased with aliases resolved; an
        empty line gives ("", "").
    """
    stripped = line.strip()
    if not stripped:
        return "", ""
    head, _, rest = stripped.partition(" ")
    name = head.lower()
    return ALIASES.get(name, name), rest.strip()


def parse_add_args(rest: str) -> tuple[str, str, str]:
    """Parse ``LABEL | DESCRIPTION [| TIP]``.

    Missing pieces come back empty so the controller's validation decides.
    """
    pieces = [p.strip() for p in rest.split("|")]
    label = pieces[0] if pieces else ""
    description = pieces[1] if len(pieces) > 1 else ""
    tip = "|".join(pieces[2:]).strip()
    return label, description, tip


def resolve_position(controller: MoodController, arg: str) -> Optional[int]:
    """Map a 1-based position in the visible list to a catalog index."""
    tokens = arg.split()
    if not tokens or not tokens[0].isdecimal():
        return None
    position = int(tokens[0])

    visible = controller.view().visible_catalog
    if not 1 <= position <= len(visible):
        return None
    return controller.index_of(visible[position - 1].id)


def run_command(controller: MoodController, command: str, rest: str) -> bool:
    """Apply one command.

    Returns:
        False when the session should end.
    """
    if command == "quit":
        return False

    if command in ("select", "fav", "delete"):
        index = resolve_position(controller, rest)
        if index is None:
            console.print(f"[yellow]No mood at position '{escape(rest)}'[/yellow]")
            return True
        if command == "select":
            controller.select_mood(index)
        elif command == "fav":
            controller.toggle_favorite(index)
        elif not controller.delete_custom_mood(index):
            console.print("[yellow]Built-in moods cannot be deleted[/yellow]")
    elif command == "add":
        label, description, tip = parse_add_args(rest)
        controller.set_drafts(label, description, tip)
        controller.add_from_drafts()
    elif command == "note":
        controller.set_draft_note(rest)
        console.print("[dim]Note drafted. Use 'save' to log it.[/dim]")
    elif command == "save":
        if rest:
            controller.set_draft_note(rest)
        if controller.save_note() is None:
            console.print("[yellow]Select a mood first[/yellow]")
    elif command == "clear":
        controller.clear_selection()
    elif command == "search":
        controller.set_search(rest)
    elif command == "history":
        console.print(render_history(controller.state.history))
        return True
    elif command == "stats":
        console.print(render_stats(controller.view()))
        return True
    elif command == "help":
        console.print(HELP_TEXT)
        return True
    else:
        console.print(f"[yellow]Unknown command '{escape(command)}'. Type 'help'.[/yellow]")
        return True

    console.print(render_session(controller.view()))
    return True


@click.command("session")
@click.pass_context
def session(ctx: click.Context) -> None:
    """Start an interactive mood-logging session.

    Nothing is saved: the session ends when you quit.

    \b
    Examples:
      moodlog session
      moodlog -v session     # with debug logging
    """
    config = (ctx.obj or {}).get("config") or AppConfig()
    controller = MoodController(config=config)

    console.print(render_session(controller.view()))
    console.print("[dim]Type 'help' for commands.[/dim]")

    while True:
        try:
            line = click.prompt("mood", default="", show_default=False, prompt_suffix="> ")
        except (EOFError, click.Abort):
            break

        command, rest = parse_command(line)
        if not command:
            continue

        try:
            if not run_command(controller, command, rest):
                break
        except MoodlogError as e:
            logger.debug("Command %r failed: %s", command, e)
            console.print(Panel(
                f"[red]{escape(str(e))}[/red]",
                title="[bold red]Error[/bold red]",
                border_style="red",
            ))
            console.print(render_session(controller.view()))

    view = controller.view()
    console.print(f"\n[dim]Session ended. {view.total_logged} moods logged, streak {view.streak}.[/dim]")
