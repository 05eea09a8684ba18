"""Transient feedback channels (toast messages, confetti).

A channel holds at most one message. Showing a new message replaces the old
one and restarts the countdown. Each show() hands back a token; a dismissal
carrying an older token is ignored, so an expired timer from a previous
message can never clear the one currently on screen.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

CONFETTI = "🎉✨🎊🥳🎈"


class FeedbackChannel:
    """Single-slot auto-dismissing message."""

    def __init__(self, duration: float, clock: Callable[[], float] = time.monotonic, name: str = "toast"):
        """Initialize the channel.

        Args:
            duration: Seconds a message stays visible.
            clock: Monotonic time source, injectable for tests.
            name: Used in log messages.
        """
        if duration <= 0:
            raise ValueError("duration must be positive")
        self.duration = duration
        self.name = name
        self._clock = clock
        self._message: Optional[str] = None
        self._token = 0
        self._deadline: Optional[float] = None

    @property
    def token(self) -> int:
        """Token of the most recent show()."""
        return self._token

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def show(self, message: str) -> int:
        """Display ``message``, replacing whatever is showing.

        Returns:
            Token identifying this message for :meth:`dismiss`.
        """
        self._token += 1
        self._message = message
        self._deadline = self._clock() + self.duration
        logger.debug("%s #%d: %s", self.name, self._token, message)
        return self._token

    def dismiss(self, token: int) -> bool:
        """Clear the slot if ``token`` still owns it.

        Returns:
            True if the message was cleared.
        """
        if token != self._token or self._message is None:
            logger.debug("%s: stale dismissal #%d ignored", self.name, token)
            return False
        self._message = None
        self._deadline = None
        return True

    def expire(self) -> bool:
        """Run the pending dismissal if its deadline has passed."""
        if self._deadline is not None and self._clock() >= self._deadline:
            return self.dismiss(self._token)
        return False

    def current(self) -> Optional[str]:
        """Message currently visible, or None."""
        self.expire()
        return self._message

    @property
    def active(self) -> bool:
        return self.current() is not None
