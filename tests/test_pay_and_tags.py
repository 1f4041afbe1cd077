"""
Tests for pay calculation and report template tags.
"""

from decimal import Decimal

import pytest
from django.template import Context, Template

from apps.groups.models import Group
from apps.groups.services import calculate_pay
from apps.reports.services import UserStatistics
from apps.reports.templatetags import report_tags


def group(basis, rate):
    return Group(name='Rates', pay_basis=basis, pay_rate=Decimal(rate))


class TestCalculatePay:
    """Tests for calculate_pay."""

    def test_per_minute(self):
        pay = calculate_pay(group(Group.PayBasis.PER_MINUTE, '5.00'), 150, 999, 9)
        assert pay == Decimal('12.50')

    def test_per_syllable(self):
        pay = calculate_pay(group(Group.PayBasis.PER_SYLLABLE, '0.0250'), 999, 101, 9)
        assert pay == Decimal('2.53')

    def test_per_task(self):
        pay = calculate_pay(group(Group.PayBasis.PER_TASK, '3'), 999, 999, 4)
        assert pay == Decimal('12.00')

    def test_zero_activity(self):
        assert calculate_pay(group(Group.PayBasis.PER_MINUTE, '5'), 0, 0, 0) == Decimal('0.00')

    def test_float_seconds(self):
        pay = calculate_pay(group(Group.PayBasis.PER_MINUTE, '1'), 90.6, 0, 1)
        assert pay == Decimal('1.51')

    def test_unknown_basis(self):
        with pytest.raises(ValueError):
            calculate_pay(group('per_hour', '1'), 60, 0, 1)


class TestReportTags:
    """Tests for report_tags filters and tags."""

    @pytest.mark.parametrize('seconds, expected', [
        (90, '1.50'),
        (0, '0.00'),
        (None, '0.00'),
        ('abc', '0.00'),
        (3601, '60.02'),
    ])
    def test_reviewed_minutes(self, seconds, expected):
        assert report_tags.reviewed_minutes(seconds) == expected

    @pytest.mark.parametrize('value, expected', [
        (Decimal('12.5'), 'Rs. 12.50'),
        (0, 'Rs. 0.00'),
        (None, '-'),
        ('n/a', '-'),
    ])
    def test_format_currency(self, value, expected):
        assert report_tags.format_currency(value) == expected

    def test_state_class(self):
        assert report_tags.state_class('accepted') == 'bg-green-100 text-green-800'
        assert report_tags.state_class('unknown') == 'bg-gray-100 text-gray-800'

    def test_pay_amount_uses_row_metrics(self):
        stats = UserStatistics(id=1, name='x', no_reviewed=2, reviewed_secs=120, syllable_count=10)
        assert report_tags.pay_amount(group(Group.PayBasis.PER_MINUTE, '2'), stats) == Decimal('4.00')
        assert report_tags.pay_amount(None, stats) is None

    def test_pay_amount_unknown_basis_renders_dash(self):
        stats = UserStatistics(id=1, name='x', no_reviewed=1, reviewed_secs=60, syllable_count=4)
        template = Template('{% load report_tags %}{% pay_amount group row as amount %}{{ amount|format_currency }}')

        rendered = template.render(Context({'group': group('per_hour', '1'), 'row': stats}))

        assert rendered == '-'

    def test_tags_render_in_template(self):
        template = Template(
            '{% load report_tags %}'
            '{{ secs|reviewed_minutes }}|{% pay_amount group row as amount %}{{ amount|format_currency }}'
        )
        stats = UserStatistics(id=1, name='x', no_reviewed=1, reviewed_secs=60, syllable_count=4)
        context = Context({
            'secs': 60,
            'group': group(Group.PayBasis.PER_SYLLABLE, '0.5'),
            'row': stats,
        })

        assert template.render(context) == '1.00|Rs. 2.00'
