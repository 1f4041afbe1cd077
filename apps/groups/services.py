"""
Service layer for groups app.

Services:
- calculate_pay: Turn a transcriber's reviewed metrics into a currency amount
"""

from decimal import Decimal, ROUND_HALF_UP

from .models import Group


CURRENCY_PLACES = Decimal('0.01')


def calculate_pay(group, reviewed_secs, syllable_count, no_reviewed) -> Decimal:
    """
    Calculate the pay owed for reviewed work using the group's rate.

    Args:
        group: Group instance (its pay_basis and pay_rate are used)
        reviewed_secs: Total audio seconds of reviewed tasks
        syllable_count: Total syllables in reviewed transcripts
        no_reviewed: Number of reviewed tasks

    Returns:
        Decimal: Amount rounded half-up to two places

    Raises:
        ValueError: If the group has an unknown pay basis
    """
    rate = Decimal(str(group.pay_rate or 0))

    if group.pay_basis == Group.PayBasis.PER_MINUTE:
        units = Decimal(str(reviewed_secs or 0)) / Decimal('60')
    elif group.pay_basis == Group.PayBasis.PER_SYLLABLE:
        units = Decimal(syllable_count or 0)
    elif group.pay_basis == Group.PayBasis.PER_TASK:
        units = Decimal(no_reviewed or 0)
    else:
        raise ValueError(f"Unknown pay basis for group {group}: {group.pay_basis!r}")

    return (units * rate).quantize(CURRENCY_PLACES, rounding=ROUND_HALF_UP)
