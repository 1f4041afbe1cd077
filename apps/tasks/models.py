"""
Task models.

Models:
- Task: One audio clip moving through transcription and review

State workflow:
- imported → transcribing → submitted → accepted → finalised
- submitted can go back to transcribing when a reviewer rejects it
- Any state can transition to trashed
"""

from django.conf import settings
from django.db import models


class Task(models.Model):
    """
    Unit of transcription work.

    The transcriber submits a transcript, a reviewer accepts it
    (reviewed_transcript + reviewed_at), a final reviewer finalises it.
    """

    class State(models.TextChoices):
        IMPORTED = 'imported', 'Imported'
        TRANSCRIBING = 'transcribing', 'Transcribing'
        SUBMITTED = 'submitted', 'Submitted'
        ACCEPTED = 'accepted', 'Accepted'
        FINALISED = 'finalised', 'Finalised'
        TRASHED = 'trashed', 'Trashed'

    # States that count as "reviewed" for reports and pay
    REVIEWED_STATES = (State.ACCEPTED, State.FINALISED)
    # States that count as "submitted" by the transcriber
    SUBMITTED_STATES = (State.SUBMITTED, State.ACCEPTED, State.FINALISED)

    group = models.ForeignKey(
        'groups.Group',
        on_delete=models.PROTECT,
        related_name='tasks',
    )

    # Audio
    file_name = models.CharField(max_length=255, blank=True)
    url = models.URLField(max_length=500, blank=True)
    audio_duration = models.FloatField(
        null=True,
        blank=True,
        help_text='Audio length in seconds'
    )

    # Transcripts at each stage
    inference_transcript = models.TextField(null=True, blank=True)
    transcript = models.TextField(null=True, blank=True)
    reviewed_transcript = models.TextField(null=True, blank=True)
    final_transcript = models.TextField(null=True, blank=True)

    state = models.CharField(
        max_length=15,
        choices=State.choices,
        default=State.IMPORTED,
        db_index=True,
    )

    # Relationships
    transcriber = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transcriber_tasks',
    )
    reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewer_tasks',
    )
    final_reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='final_reviewer_tasks',
    )

    # Timestamps
    submitted_at = models.DateTimeField(null=True, blank=True, db_index=True)
    reviewed_at = models.DateTimeField(null=True, blank=True, db_index=True)
    finalised_reviewed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'task'
        verbose_name_plural = 'tasks'
        ordering = ['id']

    def __str__(self):
        return f"Task {self.pk}: {self.file_name or 'untitled'} ({self.state})"

    def clean(self):
        """Validate that each user slot holds a user of the matching role."""
        from django.core.exceptions import ValidationError

        slots = (
            ('transcriber', 'TRANSCRIBER'),
            ('reviewer', 'REVIEWER'),
            ('final_reviewer', 'FINAL_REVIEWER'),
        )
        errors = {}
        for field, role in slots:
            user = getattr(self, field)
            if user is not None and user.role != role:
                errors[field] = f'{field.replace("_", " ").capitalize()} must have the {role} role.'
        if errors:
            raise ValidationError(errors)

    @property
    def is_reviewed(self):
        """Check if task has been accepted or finalised."""
        return self.state in self.REVIEWED_STATES

    @property
    def audio_minutes(self):
        """Audio duration in minutes (0 if unknown)."""
        return (self.audio_duration or 0) / 60
