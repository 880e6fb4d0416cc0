"""
devices_app.admin — Read-mostly admin view of pairing records.

Codes are never editable here; support staff only inspect state.
"""

from django.contrib import admin
from .models import DeviceLink


@admin.register(DeviceLink)
class DeviceLinkAdmin(admin.ModelAdmin):
    list_display = ("user_code", "status", "user", "device_type", "created_at", "expires_at")
    list_filter = ("status", "device_type")
    search_fields = ("user_code", "user__email")
    exclude = ("device_code",)
    readonly_fields = ("user_code", "status", "user", "device_type", "created_at", "expires_at")

    def has_add_permission(self, request):
        return False
