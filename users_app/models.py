"""
users_app.models — Custom UserProfile model for Playgate backend

Extends Django's AbstractUser with a display name that paired
devices show on their "signed in as" screen.

Includes:
- display_name: optional public name
- get_display_name(): display_name → full name → username
"""

from django.db import models
from django.contrib.auth.models import AbstractUser


class UserProfile(AbstractUser):
    """
    Custom user model extending Django’s AbstractUser.

    Adds:
        display_name (CharField): Optional public name shown on devices.
    """

    display_name = models.CharField(
        max_length=120,
        blank=True,
        default="",
        help_text="Optional public name shown on paired devices.",
    )

    def get_display_name(self) -> str:
        return self.display_name or self.get_full_name() or self.username
