"""
Admin configuration for tasks app.
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    """Admin for Task model."""

    list_display = (
        'id', 'file_name', 'group', 'state_display', 'audio_duration',
        'transcriber', 'reviewer', 'submitted_at', 'reviewed_at'
    )
    list_filter = ('state', 'group', 'reviewed_at', 'submitted_at')
    search_fields = ('file_name', 'transcript', 'reviewed_transcript')
    ordering = ('-id',)
    date_hierarchy = 'reviewed_at'
    raw_id_fields = ('transcriber', 'reviewer', 'final_reviewer')

    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('group', 'file_name', 'url', 'audio_duration', 'state')
        }),
        ('Assignment', {
            'fields': ('transcriber', 'reviewer', 'final_reviewer')
        }),
        ('Transcripts', {
            'fields': (
                'inference_transcript', 'transcript',
                'reviewed_transcript', 'final_transcript'
            ),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': (
                'submitted_at', 'reviewed_at', 'finalised_reviewed_at',
                'created_at', 'updated_at'
            ),
        }),
    )

    def state_display(self, obj):
        """Display state with color coding."""
        colors = {
            'imported': '#6B7280',
            'transcribing': '#2563EB',
            'submitted': '#F59E0B',
            'accepted': '#059669',
            'finalised': '#7C3AED',
            'trashed': '#DC2626',
        }
        return format_html(
            '<span style="color: {}; font-weight: 500;">{}</span>',
            colors.get(obj.state, '#6B7280'), obj.get_state_display()
        )
    state_display.short_description = 'State'
    state_display.admin_order_field = 'state'

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related(
            'group', 'transcriber', 'reviewer'
        )
