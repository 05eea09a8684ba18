"""Data models for MoodLog."""

from moodlog.models.mood import MoodEntry
from moodlog.models.history import HistoryRecord
from moodlog.models.session import SessionState
from moodlog.models.view import SessionView

__all__ = [
    "MoodEntry",
    "HistoryRecord",
    "SessionState",
    "SessionView",
]
