"""Derived views over a session.

Every function here is pure: it reads the state it is given and returns a
new value. Nothing is cached; the catalog and history are small enough to
recompute on every render.
"""

from datetime import date
from typing import Optional

from moodlog.models import HistoryRecord, MoodEntry, SessionState, SessionView

REMINDER_TEXT = "Don't forget to log your mood today!"


def visible_catalog(catalog: list[MoodEntry], search_query: str) -> list[MoodEntry]:
    """Filter the catalog by search text and put favorites first.

    Args:
        catalog: Entries in catalog order.
        search_query: Case-insensitive substring matched against label and
            description. Blank text disables filtering.

    Returns:
        Favorites in catalog order, followed by the rest in catalog order.
    """
    needle = search_query.strip().casefold()
    if needle:
        entries = [
            m for m in catalog
            if needle in m.label.casefold() or needle in m.description.casefold()
        ]
    else:
        entries = list(catalog)

    favorites = [m for m in entries if m.is_favorite]
    others = [m for m in entries if not m.is_favorite]
    return favorites + others


def has_logged_today(history: list[HistoryRecord], today: date) -> bool:
    """True if any record was logged on ``today``'s calendar date."""
    return any(record.timestamp.date() == today for record in history)


def mood_frequency(history: list[HistoryRecord]) -> dict[str, int]:
    """Count records per mood label, keyed in first-seen order."""
    counts: dict[str, int] = {}
    for record in history:
        counts[record.mood_label] = counts.get(record.mood_label, 0) + 1
    return counts


def most_frequent_mood(frequency: dict[str, int]) -> Optional[str]:
    """Label with the highest count; the first one seen wins a tie."""
    best_label = None
    best_count = 0
    for label, count in frequency.items():
        if count > best_count:
            best_label = label
            best_count = count
    return best_label


def total_logged(history: list[HistoryRecord]) -> int:
    return len(history)


def mood_name(label: str) -> str:
    """Name part of a label: the text after the emoji.

    "😊 Happy" gives "Happy". A label with no space is returned whole.
    """
    parts = label.strip().split(" ", 1)
    if len(parts) < 2 or not parts[1].strip():
        return label.strip()
    return parts[1].strip()


def selected_entry(state: SessionState) -> Optional[MoodEntry]:
    index = state.selected_index
    if index is None:
        return None
    return state.catalog[index]


def build_view(
    state: SessionState,
    today: date,
    toast: Optional[str] = None,
    confetti: bool = False,
) -> SessionView:
    """Assemble everything the presentation layer renders.

    Args:
        state: Current session.
        today: Date used for the logged-today check.
        toast: Active toast message, if any.
        confetti: Whether the confetti animation is showing.

    Returns:
        A frozen snapshot of the session.
    """
    frequency = mood_frequency(state.history)
    logged = has_logged_today(state.history, today)

    return SessionView(
        visible_catalog=visible_catalog(state.catalog, state.search_query),
        selected=selected_entry(state),
        streak=state.streak,
        search_query=state.search_query,
        logged_today=logged,
        reminder=None if logged else REMINDER_TEXT,
        frequency=frequency,
        most_frequent=most_frequent_mood(frequency),
        total_logged=total_logged(state.history),
        history=list(state.history),
        toast=toast,
        confetti=confetti,
    )
