"""
Tests for the report aggregation helpers.

These use unsaved model instances and need no database.
"""

from datetime import timedelta

from apps.accounts.models import User
from apps.reports.services import (
    UserStatistics,
    build_user_statistics,
    filter_tasks_by_date_range,
    split_into_syllables,
)
from apps.tasks.models import Task

from tests.helpers import aware


def transcriber(pk=1, first_name='Tenzin', last_name='Dolma'):
    return User(id=pk, email=f'user{pk}@example.com', first_name=first_name,
                last_name=last_name, role=User.Role.TRANSCRIBER)


def task(state, duration=0, transcript=None, reviewed_at=None):
    return Task(state=state, audio_duration=duration,
                reviewed_transcript=transcript, reviewed_at=reviewed_at)


class TestSplitIntoSyllables:
    """Tests for split_into_syllables."""

    def test_empty_and_missing_input(self):
        assert split_into_syllables('') == []
        assert split_into_syllables(None) == []

    def test_collapses_repeated_whitespace(self):
        assert split_into_syllables('a b  c') == ['a', 'b', 'c']

    def test_tibetan_delimiters(self):
        assert split_into_syllables('བཀྲ་ཤིས་བདེ་ལེགས།') == ['བཀྲ', 'ཤིས', 'བདེ', 'ལེགས']

    def test_mixed_delimiters_and_edges(self):
        text = ' ་ཀ་ ཁ།།\nག\t'
        assert split_into_syllables(text) == ['ཀ', 'ཁ', 'ག']

    def test_only_delimiters(self):
        assert split_into_syllables(' ་ ། ') == []


class TestFilterTasksByDateRange:
    """Tests for filter_tasks_by_date_range."""

    def test_bounds_are_inclusive(self):
        start = aware(2024, 1, 1)
        end = aware(2024, 1, 31, 23, 59, 59)
        on_start = task('accepted', reviewed_at=start)
        on_end = task('accepted', reviewed_at=end)

        assert filter_tasks_by_date_range([on_start, on_end], start, end) == [on_start, on_end]

    def test_one_instant_outside_is_excluded(self):
        start = aware(2024, 1, 1)
        end = aware(2024, 1, 31)
        before = task('accepted', reviewed_at=start - timedelta(microseconds=1))
        after = task('accepted', reviewed_at=end + timedelta(microseconds=1))

        assert filter_tasks_by_date_range([before, after], start, end) == []

    def test_task_after_range_excluded_regardless_of_state(self):
        tasks = [
            task(state, reviewed_at=aware(2024, 2, 1))
            for state in ('submitted', 'accepted', 'finalised')
        ]
        assert filter_tasks_by_date_range(tasks, '2024-01-01', '2024-01-31') == []

    def test_string_bounds(self):
        inside = task('accepted', reviewed_at=aware(2024, 1, 15, 10))
        assert filter_tasks_by_date_range([inside], '2024-01-01', '2024-01-31') == [inside]

    def test_missing_reviewed_at_is_excluded(self):
        unreviewed = task('accepted', reviewed_at=None)
        assert filter_tasks_by_date_range([unreviewed], aware(2024, 1, 1), aware(2024, 12, 31)) == []

    def test_missing_or_malformed_bounds_exclude_everything(self):
        reviewed = task('accepted', reviewed_at=aware(2024, 1, 15))
        assert filter_tasks_by_date_range([reviewed], None, aware(2024, 12, 31)) == []
        assert filter_tasks_by_date_range([reviewed], 'not-a-date', '2024-12-31') == []
        assert filter_tasks_by_date_range([reviewed], '2024-01-01', '2024-02-30') == []

    def test_preserves_order_and_does_not_mutate(self):
        tasks = [
            task('accepted', reviewed_at=aware(2024, 1, 20)),
            task('accepted', reviewed_at=aware(2023, 12, 31)),
            task('accepted', reviewed_at=aware(2024, 1, 5)),
        ]
        original = list(tasks)

        result = filter_tasks_by_date_range(tasks, '2024-01-01', '2024-01-31')

        assert result == [tasks[0], tasks[2]]
        assert tasks == original
        assert result is not tasks


class TestBuildUserStatistics:
    """Tests for build_user_statistics."""

    def test_only_reviewed_tasks_count(self):
        tasks = [
            task('submitted', duration=100),
            task('accepted', duration=200, transcript='ཀ ཁ'),
        ]

        stats = build_user_statistics(transcriber(), tasks, 5)

        assert stats == UserStatistics(
            id=1, name='Tenzin Dolma',
            no_submitted=5, no_reviewed=1, reviewed_secs=200, syllable_count=2,
        )

    def test_empty_task_list(self):
        stats = build_user_statistics(transcriber(), [], 0)

        assert (stats.no_submitted, stats.no_reviewed, stats.reviewed_secs, stats.syllable_count) == (0, 0, 0, 0)

    def test_reviewed_secs_is_sum_over_accepted_and_finalised(self):
        tasks = [
            task('accepted', duration=30.5),
            task('finalised', duration=12),
            task('submitted', duration=1000),
            task('trashed', duration=1000),
            task('transcribing', duration=1000),
            task('some-future-state', duration=1000),
        ]

        stats = build_user_statistics(transcriber(), tasks, 3)

        assert stats.reviewed_secs == 42.5
        assert stats.no_reviewed == 2

    def test_missing_transcript_and_duration_count_zero(self):
        tasks = [task('finalised', duration=None, transcript=None)]

        stats = build_user_statistics(transcriber(), tasks, 1)

        assert stats.no_reviewed == 1
        assert stats.reviewed_secs == 0
        assert stats.syllable_count == 0

    def test_is_idempotent(self):
        tasks = [
            task('accepted', duration=90, transcript='ཀ་ཁ་ག'),
            task('finalised', duration=30, transcript='ང'),
        ]
        user = transcriber()

        assert build_user_statistics(user, tasks, 4) == build_user_statistics(user, tasks, 4)

    def test_submitted_count_is_not_reconciled(self):
        tasks = [task('accepted', duration=10), task('finalised', duration=10)]

        stats = build_user_statistics(transcriber(), tasks, 1)

        assert stats.no_submitted == 1
        assert stats.no_reviewed == 2
        assert stats.counts_consistent is False

    def test_reviewed_minutes(self):
        stats = UserStatistics(id=1, name='x', reviewed_secs=125)
        assert stats.reviewed_minutes == 2.08
