"""
Service layer for reports app.

Group reports for the transcription workflow:
- Transcriber report: submitted/reviewed counts, reviewed audio seconds and
  reviewed syllable count per transcriber of a group
- Reviewer report: reviewed/accepted/finalised counts per reviewer of a group

Pay is not computed here; the presentation layer feeds a row's reviewed
metrics to apps.groups.services.calculate_pay.

Note: no_submitted comes from a database count over submitted_at while the
reviewed metrics are folded from the in-memory task list filtered on
reviewed_at. The two are never reconciled; both are kept on the row.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from apps.accounts.services import (
    get_reviewers_by_group, get_transcribers_by_group, get_user_tasks
)
from apps.tasks.models import Task
from apps.tasks.services import get_reviewer_task_counts, get_user_submitted_count

from .dates import DateRange, parse_bound

logger = logging.getLogger(__name__)


# Whitespace plus Tibetan tsheg (U+0F0B) and shad (U+0F0D)
SYLLABLE_DELIMITERS = re.compile(r'[\s་།]+')


class ReportGenerationError(Exception):
    """Raised when a report cannot be built because a data fetch failed."""


@dataclass
class UserStatistics:
    """One transcriber row of a group report."""

    id: int
    name: str
    no_submitted: int = 0
    no_reviewed: int = 0
    reviewed_secs: float = 0
    syllable_count: int = 0

    @property
    def reviewed_minutes(self):
        return round(self.reviewed_secs / 60, 2)

    @property
    def counts_consistent(self):
        """False when more tasks were reviewed than the submitted count reports."""
        return self.no_reviewed <= self.no_submitted


@dataclass
class ReviewerStatistics:
    """One reviewer row of a group report."""

    id: int
    name: str
    no_reviewed: int = 0
    no_accepted: int = 0
    no_finalised: int = 0


@dataclass
class ReportResult:
    """Outcome of a report request: rows on success, an error message on failure."""

    rows: List = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, rows):
        return cls(rows=list(rows))

    @classmethod
    def failure(cls, error):
        return cls(rows=[], error=str(error))


# =============================================================================
# Pure helpers
# =============================================================================

def split_into_syllables(transcript) -> List[str]:
    """
    Split transcript text into syllables.

    Runs of whitespace, tsheg and shad separate syllables; empty fragments
    from leading, trailing or repeated delimiters are dropped.

    Examples:
        "ཀ་ཁ། ག" -> ["ཀ", "ཁ", "ག"]
        "" / None -> []
    """
    if not transcript:
        return []
    return [s for s in SYLLABLE_DELIMITERS.split(transcript) if s]


def filter_tasks_by_date_range(tasks, from_date, to_date) -> list:
    """
    Keep tasks reviewed inside the inclusive [from_date, to_date] window.

    A task without reviewed_at, or a bound that is missing or cannot be
    parsed, makes the comparison false and the task is dropped.

    Args:
        tasks: Iterable of task-like objects with a reviewed_at attribute
        from_date: Lower bound (datetime, date or ISO string)
        to_date: Upper bound (datetime, date or ISO string)

    Returns:
        New list in the original order
    """
    start = parse_bound(from_date)
    end = parse_bound(to_date)

    filtered = []
    for task in tasks:
        reviewed_at = parse_bound(getattr(task, 'reviewed_at', None))
        if start is None or end is None or reviewed_at is None:
            continue
        if start <= reviewed_at <= end:
            filtered.append(task)
    return filtered


def build_user_statistics(user, filtered_tasks, submitted_count) -> UserStatistics:
    """
    Fold a transcriber's tasks into a report row.

    Only accepted/finalised tasks add to no_reviewed, reviewed_secs and
    syllable_count; every other state is ignored. no_submitted is taken as
    given.
    """
    stats = UserStatistics(
        id=user.id,
        name=user.get_full_name(),
        no_submitted=submitted_count,
    )

    for task in filtered_tasks:
        if task.state not in Task.REVIEWED_STATES:
            continue
        stats.no_reviewed += 1
        stats.reviewed_secs += task.audio_duration or 0
        stats.syllable_count += len(split_into_syllables(task.reviewed_transcript))

    return stats


def build_reviewer_statistics(reviewer, date_range) -> ReviewerStatistics:
    """Build a reviewer row from the database counts for the range."""
    stats = ReviewerStatistics(id=reviewer.id, name=reviewer.get_full_name())

    counts = get_reviewer_task_counts(reviewer.id, date_range)
    stats.no_reviewed = counts['no_reviewed']
    stats.no_accepted = counts['no_accepted']
    stats.no_finalised = counts['no_finalised']

    return stats


# =============================================================================
# Orchestrators
# =============================================================================

def _coerce_range(dates):
    """Accept a DateRange, a {'from': .., 'to': ..} mapping or None."""
    if dates is None:
        return DateRange()
    if isinstance(dates, DateRange):
        return dates
    return DateRange(from_date=dates.get('from'), to_date=dates.get('to'))


def build_user_report(group_id, dates=None) -> List[UserStatistics]:
    """
    Build the transcriber report for a group.

    Tasks are filtered by reviewed_at only when both bounds are given;
    otherwise every task of the transcriber is folded.

    Raises:
        ReportGenerationError: If fetching users or counts fails
    """
    date_range = _coerce_range(dates)
    logger.info(f'Generating user report for group {group_id} ({date_range})')

    try:
        report = []
        for user in get_transcribers_by_group(group_id):
            submitted_count = get_user_submitted_count(user.id, date_range)

            tasks = get_user_tasks(user)
            if date_range.is_bounded:
                tasks = filter_tasks_by_date_range(
                    tasks, date_range.from_date, date_range.to_date
                )

            report.append(build_user_statistics(user, tasks, submitted_count))
    except Exception as e:
        logger.exception(f'Failed to build user report for group {group_id} ({date_range})')
        raise ReportGenerationError(
            f'Could not generate user report for group {group_id}: {e}'
        ) from e

    return report


def build_reviewer_report(group_id, dates=None) -> List[ReviewerStatistics]:
    """
    Build the reviewer report for a group.

    Raises:
        ReportGenerationError: If fetching reviewers or counts fails
    """
    date_range = _coerce_range(dates)
    logger.info(f'Generating reviewer report for group {group_id} ({date_range})')

    try:
        report = [
            build_reviewer_statistics(reviewer, date_range)
            for reviewer in get_reviewers_by_group(group_id)
        ]
    except Exception as e:
        logger.exception(f'Failed to build reviewer report for group {group_id} ({date_range})')
        raise ReportGenerationError(
            f'Could not generate reviewer report for group {group_id}: {e}'
        ) from e

    logger.debug(f'Reviewer report for group {group_id}: {report}')
    return report


def generate_user_report_by_group(group_id, dates=None) -> ReportResult:
    """Transcriber report as a ReportResult; failures never raise."""
    try:
        return ReportResult.success(build_user_report(group_id, dates))
    except ReportGenerationError as e:
        return ReportResult.failure(e)


def generate_reviewer_report_by_group(group_id, dates=None) -> ReportResult:
    """Reviewer report as a ReportResult; failures never raise."""
    try:
        return ReportResult.success(build_reviewer_report(group_id, dates))
    except ReportGenerationError as e:
        return ReportResult.failure(e)
