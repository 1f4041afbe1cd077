"""
Group model for organizational structure.

Groups scope which users appear in a report and which pay rate applies.
Groups are flat (no hierarchy/nesting).
"""

from decimal import Decimal

from django.db import models


class Group(models.Model):
    """
    Represents a transcription group.

    Notes:
    - Every transcriber/reviewer belongs to at most one group
    - pay_basis + pay_rate form the group's pay-rate table
    """

    class PayBasis(models.TextChoices):
        PER_MINUTE = 'per_minute', 'Per reviewed minute'
        PER_SYLLABLE = 'per_syllable', 'Per reviewed syllable'
        PER_TASK = 'per_task', 'Per reviewed task'

    name = models.CharField(
        max_length=100,
        unique=True,
        help_text='Group name'
    )
    description = models.TextField(blank=True)
    pay_basis = models.CharField(
        max_length=15,
        choices=PayBasis.choices,
        default=PayBasis.PER_MINUTE,
        help_text='Which reviewed metric the pay rate applies to'
    )
    pay_rate = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        default=Decimal('0'),
        help_text='Amount (Rs.) paid per unit of the pay basis'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'group'
        verbose_name_plural = 'groups'
        ordering = ['name']

    def __str__(self):
        return self.name

    def clean(self):
        """Validate that the pay rate is not negative."""
        from django.core.exceptions import ValidationError

        if self.pay_rate is not None and self.pay_rate < 0:
            raise ValidationError({
                'pay_rate': 'Pay rate cannot be negative.'
            })

    @property
    def member_count(self):
        """Return the number of active users in this group."""
        return self.users.filter(is_active=True).count()
