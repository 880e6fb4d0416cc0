"""
content_app.apps — App configuration for Playgate content module
"""

from django.apps import AppConfig


class ContentAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "content_app"
    verbose_name = "Content"
