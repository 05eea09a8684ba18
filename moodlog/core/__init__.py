"""Session core: catalog, derived views, feedback and the interaction controller."""

from moodlog.core.catalog import BUILTIN_MOODS, create_session
from moodlog.core.controller import MoodController
from moodlog.core.feedback import FeedbackChannel

__all__ = [
    "BUILTIN_MOODS",
    "create_session",
    "MoodController",
    "FeedbackChannel",
]
