"""Shared fixtures and strategies for MoodLog tests."""

from datetime import datetime

import pytest
from hypothesis import strategies as st

from moodlog.core.controller import MoodController
from moodlog.models import MoodEntry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


FIXED_NOW = datetime(2024, 3, 7, 9, 30, 15)


def make_controller(now: datetime = FIXED_NOW) -> MoodController:
    """Controller over the built-in catalog with a frozen wall clock."""
    return MoodController(now=lambda: now)


def non_blank_text(max_size: int = 20):
    return st.text(min_size=1, max_size=max_size).filter(lambda x: x.strip() != "")


def catalog_strategy(alphabet=None, max_size: int = 15):
    """Lists of MoodEntry with unique ids 1..n."""
    text = (
        st.text(alphabet=alphabet, min_size=1, max_size=15)
        if alphabet is not None
        else st.text(min_size=1, max_size=15)
    )
    rows = st.lists(
        st.tuples(text, text, st.booleans(), st.booleans()),
        max_size=max_size,
    )
    return rows.map(lambda items: [
        MoodEntry(
            id=i + 1,
            label=label,
            description=description,
            tip="tip",
            is_favorite=favorite,
            is_custom=custom,
        )
        for i, (label, description, favorite, custom) in enumerate(items)
    ])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller():
    return make_controller()
