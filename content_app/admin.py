"""
content_app.admin — Django admin registration for Playgate videos

Purpose:
--------
Registers the Video model in the Django Admin interface,
allowing staff to flag premium videos and set their HLS source.
"""

from django.contrib import admin
from .models import Video


@admin.register(Video)
class VideoAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "is_premium", "playback_id", "created_at", "id")
    list_filter = ("is_premium", "category")
    search_fields = ("title",)
    fields = (
        "title",
        "description",
        "category",
        "is_premium",
        "hls_url",
        "thumbnail_url",
        "created_at",
    )

    readonly_fields = ("created_at",)
