"""Interaction controller: every user action that changes a session.

Each method maps to one gesture in the UI. Out-of-range indices and other
impossible requests are ignored and reported through the return value, so
the session invariants hold even when the controller is driven directly.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from moodlog.config import AppConfig
from moodlog.core.catalog import create_session
from moodlog.core.feedback import CONFETTI, FeedbackChannel
from moodlog.core.views import build_view, mood_name, selected_entry
from moodlog.errors import ValidationError
from moodlog.models import HistoryRecord, MoodEntry, SessionState, SessionView

logger = logging.getLogger(__name__)

MSG_SELECTED = "You are feeling {name}!"
MSG_MISSING_FIELDS = "Please fill in both Mood and Description!"
MSG_ADDED = "Mood added!"
MSG_RESET = "Selection and streak reset!"
MSG_SAVED = "Mood and note saved!"


class MoodController:
    """Applies user actions to a :class:`SessionState`."""

    def __init__(
        self,
        state: Optional[SessionState] = None,
        config: Optional[AppConfig] = None,
        toast: Optional[FeedbackChannel] = None,
        confetti: Optional[FeedbackChannel] = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the controller.

        Args:
            state: Session to drive. A fresh built-in catalog if omitted.
            config: Settings for feedback timing and default tip.
            toast: Toast channel. Built from config if omitted.
            confetti: Confetti channel. Built from config if omitted.
            now: Wall-clock source for history timestamps.
        """
        self.config = config or AppConfig()
        self.state = state if state is not None else create_session()
        self.toast = toast or FeedbackChannel(self.config.toast_seconds, name="toast")
        self.confetti = confetti or FeedbackChannel(self.config.confetti_seconds, name="confetti")
        self._now = now

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def add_custom_mood(self, label: str, description: str, tip: Optional[str] = None) -> MoodEntry:
        """Append a user-defined mood.

        Raises:
            ValidationError: label or description is blank. Nothing is
                changed except the toast.
        """
        label = (label or "").strip()
        description = (description or "").strip()

        if not label or not description:
            field = "label" if not label else "description"
            self.toast.show(MSG_MISSING_FIELDS)
            logger.info("Rejected new mood: missing %s", field)
            raise ValidationError(field, MSG_MISSING_FIELDS)

        tip = (tip or "").strip() or self.config.default_tip
        entry = MoodEntry(
            id=self.state.allocate_id(),
            label=label,
            description=description,
            tip=tip,
            is_custom=True,
        )
        self.state.catalog.append(entry)

        self.state.draft_label = ""
        self.state.draft_description = ""
        self.state.draft_tip = ""
        self.state.draft_note = ""
        self.state.search_query = ""
        self.state.selected_id = None
        self.toast.show(MSG_ADDED)
        logger.info("Added custom mood %r (id=%d)", entry.label, entry.id)
        return entry

    def add_from_drafts(self) -> MoodEntry:
        """Submit the add-mood form using the draft fields."""
        return self.add_custom_mood(
            self.state.draft_label,
            self.state.draft_description,
            self.state.draft_tip,
        )

    def toggle_favorite(self, index: int) -> bool:
        """Flip the favorite flag of the entry at ``index``.

        Returns:
            False if the index does not exist.
        """
        entry = self.state.entry_at(index)
        if entry is None:
            logger.debug("toggle_favorite: no entry at %d", index)
            return False
        self.state.catalog[index] = entry.toggled()
        self.state.draft_note = ""
        return True

    def delete_custom_mood(self, index: int) -> bool:
        """Remove a custom mood. Built-in moods are never removed.

        Returns:
            True if an entry was removed.
        """
        entry = self.state.entry_at(index)
        if entry is None:
            logger.debug("delete_custom_mood: no entry at %d", index)
            return False
        if not entry.is_custom:
            logger.debug("delete_custom_mood: %r is built in", entry.label)
            return False

        del self.state.catalog[index]
        if self.state.selected_id == entry.id:
            self.state.selected_id = None
        self.state.draft_note = ""
        self.state.search_query = ""
        logger.info("Deleted custom mood %r (id=%d)", entry.label, entry.id)
        return True

    # ------------------------------------------------------------------
    # Selection and notes
    # ------------------------------------------------------------------

    def select_mood(self, index: int) -> Optional[MoodEntry]:
        """Select the entry at ``index``, or deselect it if already selected.

        A new selection bumps the streak and shows a toast. Deselecting
        leaves the streak alone.

        Returns:
            The newly selected entry, or None after a toggle-off or an
            invalid index.
        """
        entry = self.state.entry_at(index)
        if entry is None:
            logger.debug("select_mood: no entry at %d", index)
            return None

        if self.state.selected_id == entry.id:
            self.state.selected_id = None
            return None

        self.state.selected_id = entry.id
        self.state.streak += 1
        self.state.search_query = ""
        self.toast.show(MSG_SELECTED.format(name=mood_name(entry.label)))
        return entry

    def save_note(self, note_text: Optional[str] = None) -> Optional[HistoryRecord]:
        """Log the selected mood with a note.

        Args:
            note_text: Note to attach. Uses the draft note when omitted.

        Returns:
            The new record, or None when nothing is selected.
        """
        entry = selected_entry(self.state)
        if entry is None:
            logger.debug("save_note: nothing selected")
            return None

        text = self.state.draft_note if note_text is None else note_text
        record = HistoryRecord(
            mood_label=entry.label,
            timestamp=self._now(),
            note=text.strip(),
        )
        self.state.history.insert(0, record)

        self.state.draft_note = ""
        self.state.selected_id = None
        self.state.search_query = ""
        self.toast.show(MSG_SAVED)
        self.confetti.show(CONFETTI)
        logger.info("Logged %r", record.mood_label)
        return record

    def clear_selection(self) -> None:
        """Drop the selection and reset the streak to 1."""
        self.state.selected_id = None
        self.state.streak = 1
        self.toast.show(MSG_RESET)

    # ------------------------------------------------------------------
    # Transient input
    # ------------------------------------------------------------------

    def set_search(self, query: str) -> None:
        self.state.search_query = query or ""

    def set_draft_note(self, text: str) -> None:
        self.state.draft_note = text or ""

    def set_drafts(
        self,
        label: Optional[str] = None,
        description: Optional[str] = None,
        tip: Optional[str] = None,
    ) -> None:
        """Update the add-mood form fields that are given."""
        if label is not None:
            self.state.draft_label = label
        if description is not None:
            self.state.draft_description = description
        if tip is not None:
            self.state.draft_tip = tip

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def index_of(self, mood_id: int) -> Optional[int]:
        """Catalog position of the entry with ``mood_id``."""
        return self.state.index_of(mood_id)

    def view(self) -> SessionView:
        """Snapshot of the session for rendering."""
        confetti = self.confetti.current() is not None
        return build_view(
            self.state,
            today=self._now().date(),
            toast=self.toast.current(),
            confetti=confetti,
        )
