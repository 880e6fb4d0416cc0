"""
users_app.admin — Django admin configuration for UserProfile

Extends Django’s built-in UserAdmin with the display name
shown on paired devices.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from users_app.models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(UserAdmin):
    """
    Admin interface configuration for the custom UserProfile model.
    """

    list_display = ("username", "email", "display_name", "is_active")

    # Extend base fieldsets from Django's UserAdmin with custom section
    fieldsets = (
        *UserAdmin.fieldsets,
        (
            "Devices",
            {
                "fields": ("display_name",)
            },
        ),
    )
