"""
Forms for reports app.

Forms:
- ReportFilterForm: Group, date range and report type selection
"""

from django import forms

from apps.groups.models import Group

from .dates import DateRange, end_of_day


INPUT_CLASS = 'block w-full rounded-md border-gray-300 shadow-sm focus:border-indigo-500 focus:ring-indigo-500 sm:text-sm'


class ReportFilterForm(forms.Form):
    """
    Report selection form.

    The date pickers select whole days: `from_date` starts at midnight and
    `to_date` runs to the end of the selected day.
    """

    TRANSCRIBER = 'transcriber'
    REVIEWER = 'reviewer'
    REPORT_TYPE_CHOICES = [
        (TRANSCRIBER, 'Transcribers'),
        (REVIEWER, 'Reviewers'),
    ]

    group = forms.ModelChoiceField(
        queryset=Group.objects.all(),
        empty_label='Select a group',
        widget=forms.Select(attrs={
            'class': INPUT_CLASS,
            'hx-get': '',
            'hx-trigger': 'change',
            'hx-target': '#report-container',
            'hx-push-url': 'true',
            'hx-include': '[name]',
        })
    )
    from_date = forms.DateField(
        required=False,
        label='From Date',
        widget=forms.DateInput(attrs={'type': 'date', 'class': INPUT_CLASS})
    )
    to_date = forms.DateField(
        required=False,
        label='To Date',
        widget=forms.DateInput(attrs={'type': 'date', 'class': INPUT_CLASS})
    )
    report_type = forms.ChoiceField(
        choices=REPORT_TYPE_CHOICES,
        required=False,
        initial=TRANSCRIBER,
        widget=forms.Select(attrs={'class': INPUT_CLASS})
    )

    def clean_report_type(self):
        return self.cleaned_data.get('report_type') or self.TRANSCRIBER

    def clean(self):
        cleaned_data = super().clean()
        from_date = cleaned_data.get('from_date')
        to_date = cleaned_data.get('to_date')

        if from_date and to_date and from_date > to_date:
            raise forms.ValidationError('From Date must be on or before To Date.')

        return cleaned_data

    def get_date_range(self):
        """Return the selected window as a DateRange (unbounded if incomplete)."""
        from_date = self.cleaned_data.get('from_date')
        to_date = self.cleaned_data.get('to_date')
        if not (from_date and to_date):
            return DateRange()
        return DateRange(from_date=from_date, to_date=end_of_day(to_date))
