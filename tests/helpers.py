"""
Shared builders for report tests.
"""

import datetime
from decimal import Decimal

from django.utils import timezone

from apps.accounts.models import User
from apps.groups.models import Group
from apps.tasks.models import Task


def aware(year, month, day, hour=0, minute=0, second=0, microsecond=0):
    """Aware datetime in the current time zone."""
    return timezone.make_aware(
        datetime.datetime(year, month, day, hour, minute, second, microsecond)
    )


def make_group(name='Group A', pay_basis=Group.PayBasis.PER_MINUTE, pay_rate='1.00'):
    return Group.objects.create(name=name, pay_basis=pay_basis, pay_rate=Decimal(pay_rate))


def make_user(email, role=User.Role.TRANSCRIBER, group=None, first_name='', last_name=''):
    return User.objects.create_user(
        email=email,
        password='not-a-real-password',
        first_name=first_name or email.split('@')[0].capitalize(),
        last_name=last_name,
        role=role,
        group=group,
    )


def make_task(group, state=Task.State.SUBMITTED, **fields):
    fields.setdefault('audio_duration', 60)
    return Task.objects.create(group=group, state=state, **fields)
