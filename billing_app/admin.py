"""
billing_app.admin — Subscription admin with CSV/XLSX import and export.

Billing staff reconcile provider exports against these rows, so the
admin uses django-import-export instead of plain ModelAdmin.
"""

from django.contrib import admin
from import_export import resources
from import_export.admin import ImportExportModelAdmin

from .models import Subscription


class SubscriptionResource(resources.ModelResource):
    class Meta:
        model = Subscription
        fields = (
            "id",
            "user",
            "status",
            "plan_code",
            "started_at",
            "current_period_end",
            "renews_at",
            "canceled_at",
            "provider",
            "provider_ref",
        )


@admin.register(Subscription)
class SubscriptionAdmin(ImportExportModelAdmin):
    resource_classes = [SubscriptionResource]
    list_display = ("user", "status", "plan_code", "current_period_end", "canceled_at", "provider")
    list_filter = ("status", "provider")
    search_fields = ("user__email", "provider_ref")
