"""
Admin configuration for groups app.
"""

from django.contrib import admin
from .models import Group


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    """Admin for Group model."""

    list_display = ('name', 'pay_basis', 'pay_rate', 'member_count', 'created_at')
    list_filter = ('pay_basis', 'created_at')
    search_fields = ('name',)
    ordering = ('name',)

    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('name', 'description')
        }),
        ('Pay rate', {
            'fields': ('pay_basis', 'pay_rate')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
