"""
Views for reports app.

Includes:
- Group report page (transcriber or reviewer table, HTMX partial refresh)
- Per-transcriber report page with task list filters

All views are report-admin only.
"""

from django.contrib import messages
from django.contrib.auth.decorators import login_required, user_passes_test
from django.shortcuts import get_object_or_404, render

from apps.accounts.models import User
from apps.tasks.services import get_user_submitted_count

from .filters import UserTaskFilter
from .forms import ReportFilterForm
from .services import (
    build_user_statistics,
    filter_tasks_by_date_range,
    generate_reviewer_report_by_group,
    generate_user_report_by_group,
)


def can_view_reports(user):
    """Check if user may open group reports."""
    return user.is_authenticated and user.can_view_reports()


@login_required
@user_passes_test(can_view_reports)
def reports_view(request):
    """
    Group report dashboard.

    Shows the transcriber or reviewer table for the selected group and
    date range. HTMX requests only get the table partial.
    """
    form = ReportFilterForm(request.GET or None)
    group = None
    report_type = ReportFilterForm.TRANSCRIBER
    rows = []
    report_failed = False

    if form.is_bound and form.is_valid():
        group = form.cleaned_data['group']
        report_type = form.cleaned_data['report_type']
        date_range = form.get_date_range()

        if report_type == ReportFilterForm.REVIEWER:
            result = generate_reviewer_report_by_group(group.pk, date_range)
        else:
            result = generate_user_report_by_group(group.pk, date_range)

        if result.ok:
            rows = result.rows
        else:
            report_failed = True
            messages.error(request, 'The report could not be generated. Please try again.')

    context = {
        'form': form,
        'group': group,
        'report_type': report_type,
        'rows': rows,
        'report_failed': report_failed,
    }

    if request.htmx:
        return render(request, 'reports/partials/report_table.html', context)

    return render(request, 'reports/reports.html', context)


@login_required
@user_passes_test(can_view_reports)
def user_report_view(request, pk):
    """
    Report for one transcriber: statistics plus the filtered task list.
    """
    user = get_object_or_404(
        User.objects.select_related('group'),
        pk=pk,
        role=User.Role.TRANSCRIBER,
    )

    task_filter = UserTaskFilter(request.GET or None, queryset=user.transcriber_tasks.all())
    tasks = list(task_filter.qs)
    date_range = task_filter.date_range
    if date_range.is_bounded:
        tasks = filter_tasks_by_date_range(tasks, date_range.from_date, date_range.to_date)

    submitted_count = get_user_submitted_count(user.id, date_range)
    statistics = build_user_statistics(user, tasks, submitted_count)

    context = {
        'report_user': user,
        'group': user.group,
        'filter': task_filter,
        'tasks': tasks,
        'statistics': statistics,
    }
    return render(request, 'reports/user_report.html', context)
