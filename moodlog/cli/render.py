"""Rich rendering of a session view."""

from typing import Optional

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from moodlog.core.feedback import CONFETTI
from moodlog.models import HistoryRecord, MoodEntry, SessionView


def render_catalog(entries: list[MoodEntry], selected_id: Optional[int], title: str = "How are you feeling today?") -> Table:
    """Table of moods, numbered by their position in ``entries``."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Mood", style="bold")
    table.add_column("Description")
    table.add_column("★", justify="center", width=3)
    table.add_column("Custom", justify="center")

    for i, entry in enumerate(entries, 1):
        style = "reverse" if entry.id == selected_id else None
        table.add_row(
            str(i),
            escape(entry.label),
            escape(entry.description),
            "⭐" if entry.is_favorite else "☆",
            "[magenta]✎[/magenta]" if entry.is_custom else "",
            style=style,
        )
    return table


def render_history(history: list[HistoryRecord]) -> Table | Text:
    if not history:
        return Text("No moods selected yet.", style="dim")

    table = Table(title="Mood History", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Time", style="dim")
    table.add_column("Mood", style="bold")
    table.add_column("Note")
    for record in history:
        table.add_row(record.date_text, record.time_text, escape(record.mood_label), escape(record.note))
    return table


def render_stats(view: SessionView) -> Panel:
    lines = [
        f"Total moods logged: {view.total_logged}",
        f"Most selected mood: {escape(view.most_frequent or 'N/A')}",
    ]
    for label, count in view.frequency.items():
        lines.append(f"  {escape(label)}: {count}")
    return Panel("\n".join(lines), title="[bold]Mood Analytics[/bold]", border_style="cyan")


def render_session(view: SessionView) -> Group:
    """Full screen for one frame of the interactive session."""
    parts = []

    if view.confetti:
        parts.append(Text(CONFETTI, justify="center"))
    if view.reminder:
        parts.append(Panel(view.reminder, border_style="yellow"))

    header = f"🔥 Streak: {view.streak} days"
    if view.search_query.strip():
        header += f"   🔎 {view.search_query.strip()}"
    parts.append(Text(header, style="bold"))

    if view.visible_catalog:
        selected_id = view.selected.id if view.selected else None
        parts.append(render_catalog(view.visible_catalog, selected_id))
    else:
        parts.append(Text("No moods match your search.", style="yellow"))

    if view.selected is not None:
        parts.append(Panel(
            f"{escape(view.selected.description)}\n\n[italic]Tip: {escape(view.selected.tip)}[/italic]",
            title=f"[bold]{escape(view.selected.label)}[/bold]",
            border_style="green",
        ))

    if view.toast:
        parts.append(Panel(escape(view.toast), border_style="magenta"))

    return Group(*parts)
