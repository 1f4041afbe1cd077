"""
Forms for accounts app.

Used by the Django admin:
- AdminUserCreationForm for creating users by email
- AdminUserChangeForm for editing users
"""

from django import forms
from django.contrib.auth.forms import UserCreationForm, UserChangeForm
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .models import User


def _validate_unique_email(email, exclude_pk=None):
    """Reject an email already used by another user (case-insensitive)."""
    existing = User.objects.filter(email__iexact=email)
    if exclude_pk is not None:
        existing = existing.exclude(pk=exclude_pk)
    if existing.exists():
        raise ValidationError(
            _('A user with this email already exists.'),
            code='email_exists',
        )


class AdminUserCreationForm(UserCreationForm):
    """
    Form for admin to create new users.
    Role and group decide which reports the user shows up in.
    """

    class Meta:
        model = User
        fields = ('email', 'first_name', 'last_name', 'role', 'group')

    def clean_email(self):
        email = self.cleaned_data.get('email', '').lower().strip()
        if email:
            _validate_unique_email(email)
        return email

    def clean(self):
        cleaned_data = super().clean()
        role = cleaned_data.get('role')
        group = cleaned_data.get('group')

        if role in (User.Role.TRANSCRIBER, User.Role.REVIEWER, User.Role.FINAL_REVIEWER) and not group:
            self.add_error('group', _('Transcribers and reviewers must belong to a group.'))

        return cleaned_data


class AdminUserChangeForm(UserChangeForm):
    """
    Form for admin to edit existing users.
    """

    class Meta:
        model = User
        fields = ('email', 'first_name', 'last_name', 'role', 'group', 'is_active')

    def clean_email(self):
        email = self.cleaned_data.get('email', '').lower().strip()
        if email:
            _validate_unique_email(email, exclude_pk=self.instance.pk)
        return email
