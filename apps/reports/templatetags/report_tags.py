"""
Template tags and filters for reports app.

Filters:
- reviewed_minutes: Format seconds as minutes with 2 decimal places
- format_currency: Format an amount as "Rs. X.XX"
- state_class: CSS class for a task state badge

Tags:
- pay_amount: Pay owed for a transcriber row in a group

Usage:
    {% load report_tags %}

    {{ row.reviewed_secs|reviewed_minutes }}
    {% pay_amount group row as amount %}{{ amount|format_currency }}
"""

import logging
from decimal import Decimal, InvalidOperation

from django import template

from apps.groups.services import calculate_pay

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter
def reviewed_minutes(seconds):
    """
    Format audio seconds as minutes.

    Examples:
        90 -> "1.50"
        0 -> "0.00"
        None -> "0.00"
    """
    try:
        seconds = float(seconds or 0)
    except (ValueError, TypeError):
        return "0.00"

    return f"{seconds / 60:.2f}"


@register.filter
def format_currency(value):
    """
    Format an amount in rupees.

    Examples:
        Decimal('12.5') -> "Rs. 12.50"
        None -> "-"
    """
    if value is None or value == '':
        return "-"

    try:
        value = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return "-"

    return f"Rs. {value:.2f}"


@register.filter
def state_class(state):
    """Return CSS class for a task state badge."""
    classes = {
        'imported': 'bg-gray-100 text-gray-800',
        'transcribing': 'bg-blue-100 text-blue-800',
        'submitted': 'bg-yellow-100 text-yellow-800',
        'accepted': 'bg-green-100 text-green-800',
        'finalised': 'bg-purple-100 text-purple-800',
        'trashed': 'bg-red-100 text-red-800',
    }
    return classes.get(state, 'bg-gray-100 text-gray-800')


@register.simple_tag
def pay_amount(group, statistics):
    """
    Pay owed for a transcriber row under the group's rate.

    Returns None when there is no group to take a rate from or its pay
    basis is unknown.
    """
    if group is None or statistics is None:
        return None

    try:
        return calculate_pay(
            group,
            statistics.reviewed_secs,
            statistics.syllable_count,
            statistics.no_reviewed,
        )
    except ValueError:
        logger.warning(f'Unknown pay basis {group.pay_basis!r} for group {group.pk}')
        return None
