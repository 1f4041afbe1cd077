"""
Service layer for tasks app.

Count queries consumed by the report engine:
- get_user_submitted_count: Tasks a transcriber submitted within a range
- get_reviewer_task_counts: Reviewed/accepted/finalised counts for a reviewer

Both count in the database and are independent of any task list the
caller may have filtered in memory.
"""

from django.db.models import Count, Q

from .models import Task


def _apply_range(queryset, field, date_range):
    """
    Restrict queryset to rows whose `field` lies inside date_range.

    Unbounded ranges return the queryset untouched; bounded ranges with an
    unparseable side match nothing.
    """
    if date_range is None or not date_range.is_bounded:
        return queryset
    if not date_range.is_valid:
        return queryset.none()
    return queryset.filter(**{
        f'{field}__gte': date_range.start,
        f'{field}__lte': date_range.end,
    })


def get_user_submitted_count(user_id, date_range=None) -> int:
    """
    Count tasks submitted by a transcriber.

    A task counts as submitted once it reaches submitted, accepted or
    finalised. Bounded ranges are matched against submitted_at.

    Args:
        user_id: Transcriber primary key
        date_range: DateRange or None

    Returns:
        int: Number of submitted tasks
    """
    queryset = Task.objects.filter(
        transcriber_id=user_id,
        state__in=Task.SUBMITTED_STATES,
    )
    return _apply_range(queryset, 'submitted_at', date_range).count()


def get_reviewer_task_counts(reviewer_id, date_range=None) -> dict:
    """
    Count a reviewer's tasks by review outcome.

    Bounded ranges are matched against reviewed_at.

    Args:
        reviewer_id: Reviewer primary key
        date_range: DateRange or None

    Returns:
        dict with:
        - no_reviewed: accepted + finalised
        - no_accepted: tasks still in accepted
        - no_finalised: tasks already finalised
    """
    queryset = _apply_range(
        Task.objects.filter(reviewer_id=reviewer_id),
        'reviewed_at',
        date_range,
    )
    counts = queryset.aggregate(
        no_reviewed=Count('id', filter=Q(state__in=Task.REVIEWED_STATES)),
        no_accepted=Count('id', filter=Q(state=Task.State.ACCEPTED)),
        no_finalised=Count('id', filter=Q(state=Task.State.FINALISED)),
    )
    return {key: counts[key] or 0 for key in ('no_reviewed', 'no_accepted', 'no_finalised')}
