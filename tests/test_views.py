"""Property-based tests for the derived view functions.

**Feature: mood-log**
"""

from datetime import date, datetime, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import catalog_strategy
from moodlog.core.catalog import create_session
from moodlog.core.views import (
    REMINDER_TEXT,
    build_view,
    has_logged_today,
    mood_frequency,
    mood_name,
    most_frequent_mood,
    total_logged,
    visible_catalog,
)
from moodlog.models import HistoryRecord, MoodEntry


def record(label: str, when: datetime = datetime(2024, 3, 7, 12, 0)) -> HistoryRecord:
    return HistoryRecord(mood_label=label, timestamp=when)


class TestFavoritesFirstPartition:
    """
    **Feature: mood-log, Property 4: Favorites First**

    *For any* catalog and search text, every favorite in the visible list
    comes before every non-favorite.
    """

    @given(catalog=catalog_strategy(), query=st.text(max_size=5))
    @settings(max_examples=100)
    def test_favorites_precede_others(self, catalog: list[MoodEntry], query: str):
        result = visible_catalog(catalog, query)
        flags = [m.is_favorite for m in result]
        assert flags == sorted(flags, reverse=True)

    @given(catalog=catalog_strategy())
    @settings(max_examples=50)
    def test_empty_query_keeps_every_entry(self, catalog: list[MoodEntry]):
        result = visible_catalog(catalog, "")
        assert sorted(m.id for m in result) == [m.id for m in catalog]

    @given(catalog=catalog_strategy(), query=st.text(max_size=5))
    @settings(max_examples=50)
    def test_relative_order_preserved_within_partition(self, catalog: list[MoodEntry], query: str):
        result = visible_catalog(catalog, query)
        favorites = [m.id for m in result if m.is_favorite]
        others = [m.id for m in result if not m.is_favorite]
        assert favorites == sorted(favorites)
        assert others == sorted(others)

    @given(catalog=catalog_strategy(), query=st.text(max_size=5))
    @settings(max_examples=50)
    def test_idempotent(self, catalog: list[MoodEntry], query: str):
        assert visible_catalog(catalog, query) == visible_catalog(catalog, query)


class TestSearchFiltering:
    """
    **Feature: mood-log, Property 5: Search Filtering**

    *For any* catalog, a search text that appears in no label or description
    yields an empty list.
    """

    @given(catalog=catalog_strategy(alphabet="abcdefghijklmnopqrstuvwxy0123456789 "))
    @settings(max_examples=50)
    def test_no_match_is_empty(self, catalog: list[MoodEntry]):
        assert visible_catalog(catalog, "zz-no-match") == []

    def test_matches_label_case_insensitive(self):
        catalog = create_session().catalog
        result = visible_catalog(catalog, "  hAPPy ")
        # "unhappy" appears in the Sad description
        assert [m.label for m in result] == ["😊 Happy", "😢 Sad"]

    def test_matches_description(self):
        catalog = create_session().catalog
        result = visible_catalog(catalog, "weary")
        assert [m.label for m in result] == ["😴 Tired"]

    def test_favorite_moves_to_front(self):
        catalog = create_session().catalog
        catalog[5] = catalog[5].toggled()
        result = visible_catalog(catalog, "")
        assert result[0].label == "😌 Calm"
        assert len(result) == len(catalog)


class TestLoggedToday:
    """
    **Feature: mood-log, Property 12: Logged Today**

    *For any* history, the flag is true exactly when a record shares the
    calendar date of today.
    """

    @given(offsets=st.lists(st.integers(min_value=-30, max_value=30), max_size=10))
    @settings(max_examples=50)
    def test_matches_any_same_day_record(self, offsets: list[int]):
        today = date(2024, 3, 7)
        history = [
            record("😊 Happy", datetime(2024, 3, 7, 23, 59) + timedelta(days=d))
            for d in offsets
        ]
        assert has_logged_today(history, today) == (0 in offsets)

    def test_empty_history(self):
        assert has_logged_today([], date(2024, 3, 7)) is False


class TestMoodFrequency:
    """
    **Feature: mood-log, Property 10: Mood Frequency**

    *For any* history, counts sum to the number of records and the most
    frequent mood has the highest count.
    """

    def test_example_counts(self):
        history = [record("😊 Happy"), record("😊 Happy"), record("😢 Sad")]
        frequency = mood_frequency(history)
        assert frequency == {"😊 Happy": 2, "😢 Sad": 1}
        assert most_frequent_mood(frequency) == "😊 Happy"

    def test_empty_history_has_no_most_frequent(self):
        assert mood_frequency([]) == {}
        assert most_frequent_mood({}) is None

    def test_tie_goes_to_first_seen(self):
        history = [record("😢 Sad"), record("😊 Happy"), record("😊 Happy"), record("😢 Sad")]
        assert most_frequent_mood(mood_frequency(history)) == "😢 Sad"

    @given(labels=st.lists(st.sampled_from(["😊 Happy", "😢 Sad", "😌 Calm"]), max_size=30))
    @settings(max_examples=100)
    def test_counts_sum_to_total(self, labels: list[str]):
        history = [record(label) for label in labels]
        frequency = mood_frequency(history)

        assert sum(frequency.values()) == total_logged(history) == len(labels)
        top = most_frequent_mood(frequency)
        if labels:
            assert frequency[top] == max(frequency.values())
        else:
            assert top is None


class TestMoodName:
    def test_emoji_label(self):
        assert mood_name("😊 Happy") == "Happy"

    def test_multi_word_name(self):
        assert mood_name("😍 Very Excited") == "Very Excited"

    def test_label_without_space(self):
        assert mood_name("Meh") == "Meh"


class TestBuildView:
    def test_fresh_session(self):
        state = create_session()
        view = build_view(state, today=date(2024, 3, 7))

        assert len(view.visible_catalog) == 8
        assert view.selected is None
        assert view.streak == 1
        assert view.logged_today is False
        assert view.reminder == REMINDER_TEXT
        assert view.most_frequent is None
        assert view.total_logged == 0
        assert view.toast is None
        assert view.confetti is False

    def test_reminder_hidden_after_logging_today(self):
        state = create_session()
        state.history.insert(0, record("😊 Happy", datetime(2024, 3, 7, 8, 0)))
        view = build_view(state, today=date(2024, 3, 7))

        assert view.logged_today is True
        assert view.reminder is None
        assert view.total_logged == 1

    def test_selected_entry_is_projected(self):
        state = create_session()
        state.selected_id = state.catalog[2].id
        view = build_view(state, today=date(2024, 3, 7), toast="hi", confetti=True)

        assert view.selected == state.catalog[2]
        assert view.toast == "hi"
        assert view.confetti is True
