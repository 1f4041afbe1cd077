"""
Custom User model for transcription reports.

CRITICAL: This file must be created and AUTH_USER_MODEL set before running
any migrations. Changing the User model after migrations is very complex.
"""

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class UserManager(BaseUserManager):
    """
    Custom user manager where email is the unique identifier
    for authentication instead of username.
    """

    def create_user(self, email, password=None, **extra_fields):
        """Create and save a regular user with the given email and password."""
        if not email:
            raise ValueError('The Email field must be set')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Create and save a SuperUser with the given email and password."""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', User.Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Custom User model with email authentication and workflow roles.

    Roles:
    - Transcriber: Transcribes audio, owns transcriber tasks
    - Reviewer: Reviews submitted transcripts (accept/reject)
    - Final Reviewer: Finalises accepted transcripts
    - Admin: Manages groups/users and views reports
    """

    class Role(models.TextChoices):
        TRANSCRIBER = 'TRANSCRIBER', 'Transcriber'
        REVIEWER = 'REVIEWER', 'Reviewer'
        FINAL_REVIEWER = 'FINAL_REVIEWER', 'Final Reviewer'
        ADMIN = 'ADMIN', 'Admin'

    # Remove username field, use email instead
    username = None
    email = models.EmailField(
        'email address',
        unique=True,
        error_messages={
            'unique': 'A user with that email already exists.',
        },
    )

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.TRANSCRIBER,
        db_index=True,
    )
    group = models.ForeignKey(
        'groups.Group',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='users',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    class Meta:
        verbose_name = 'user'
        verbose_name_plural = 'users'
        ordering = ['first_name', 'last_name']

    def __str__(self):
        return f"{self.get_full_name()} ({self.email})"

    def get_full_name(self):
        """Return the first_name plus the last_name, with a space in between."""
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.email

    def get_short_name(self):
        """Return the short name for the user."""
        return self.first_name or self.email.split('@')[0]

    # ==========================================================================
    # Role Methods
    # ==========================================================================

    def is_transcriber(self):
        return self.role == self.Role.TRANSCRIBER

    def is_reviewer(self):
        return self.role == self.Role.REVIEWER

    def is_final_reviewer(self):
        return self.role == self.Role.FINAL_REVIEWER

    def is_admin(self):
        """Check if user is an Admin."""
        return self.role == self.Role.ADMIN

    def can_view_reports(self):
        """Check if user can access group reports."""
        return self.is_admin() or self.is_superuser
