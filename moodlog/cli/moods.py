"""Catalog listing command for MoodLog CLI."""

import click
from rich.console import Console
from rich.markup import escape

from moodlog.cli.render import render_catalog
from moodlog.core.catalog import create_session
from moodlog.core.views import visible_catalog

console = Console()


@click.command("moods")
@click.option("--search", "-s", default="", help="Only show moods matching this text.")
def moods(search: str) -> None:
    """List the built-in moods.

    \b
    Examples:
      moodlog moods
      moodlog moods --search calm
    """
    state = create_session()
    entries = visible_catalog(state.catalog, search)

    if not entries:
        console.print(f"[yellow]No moods match '{escape(search.strip())}'[/yellow]")
        return

    console.print(render_catalog(entries, selected_id=None, title="Moods"))
