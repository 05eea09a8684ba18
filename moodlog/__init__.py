"""MoodLog - session-local mood journal with favorites, streaks and analytics."""

__version__ = "0.1.0"
