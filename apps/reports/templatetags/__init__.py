"""
Template tags package for reports app.

Available tag libraries:
- report_tags: Formatting tags for reports (reviewed_minutes, format_currency, pay_amount)

Usage in templates:
    {% load report_tags %}
"""
