"""CLI commands for MoodLog.

This package provides the command-line interface: a one-shot catalog
listing, config setup, and an interactive mood-logging session.
"""

from moodlog.cli.main import cli, main

__all__ = ["cli", "main"]
