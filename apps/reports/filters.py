"""
Report filters using django-filter.

Provides filtering for the per-transcriber report page:
- State filter (multi-select)
- Reviewed date range (from / to, whole days), read by the view and
  applied with the report engine's date filter
"""

import django_filters
from django import forms

from apps.tasks.models import Task

from .dates import DateRange, end_of_day
from .forms import INPUT_CLASS


class UserTaskFilter(django_filters.FilterSet):
    """
    Filter one transcriber's tasks.

    Usage in views:
        filterset = UserTaskFilter(request.GET, queryset=user.transcriber_tasks.all())
        tasks = filterset.qs
    """

    state = django_filters.MultipleChoiceFilter(
        choices=Task.State.choices,
        widget=forms.CheckboxSelectMultiple(attrs={
            'class': 'h-4 w-4 rounded border-gray-300 text-indigo-600 focus:ring-indigo-500',
        }),
        label='State'
    )

    reviewed_from = django_filters.DateFilter(
        field_name='reviewed_at',
        label='Reviewed From',
        method='keep_all',
        widget=forms.DateInput(attrs={'type': 'date', 'class': INPUT_CLASS})
    )

    reviewed_to = django_filters.DateFilter(
        field_name='reviewed_at',
        label='Reviewed To',
        method='keep_all',
        widget=forms.DateInput(attrs={'type': 'date', 'class': INPUT_CLASS})
    )

    class Meta:
        model = Task
        fields = ['state']

    def keep_all(self, queryset, name, value):
        """Date bounds only feed date_range; the view applies them."""
        return queryset

    @property
    def date_range(self):
        """The reviewed window as raw dates (empty when not fully given)."""
        data = getattr(self.form, 'cleaned_data', {}) if self.is_bound else {}
        reviewed_from = data.get('reviewed_from')
        reviewed_to = data.get('reviewed_to')
        if not (reviewed_from and reviewed_to):
            return DateRange()
        return DateRange(from_date=reviewed_from, to_date=end_of_day(reviewed_to))
