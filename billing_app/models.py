"""
billing_app.models — Subscription records written by the billing glue.

Rows are created/updated by provider webhooks (Stripe, PayPal) outside of
this codebase or imported through the admin. Playback only reads them to
answer "does this user hold an active subscription right now".
"""

from __future__ import annotations

from datetime import datetime

from django.conf import settings
from django.db import models
from django.utils import timezone


class SubscriptionQuerySet(models.QuerySet):
    def latest_for_user(self, user_id) -> "Subscription | None":
        """Most recent subscription row for the user, or None."""
        return self.filter(user_id=user_id).order_by("-created_at", "-id").first()


class Subscription(models.Model):
    STATUS_ACTIVE = "active"
    STATUS_TRIALING = "trialing"
    STATUS_TRIAL = "trial"
    STATUS_PAST_DUE = "past_due"
    STATUS_CANCELED = "canceled"

    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_TRIALING, "Trialing"),
        (STATUS_TRIAL, "Trial"),
        (STATUS_PAST_DUE, "Past due"),
        (STATUS_CANCELED, "Canceled"),
    ]

    ENTITLED_STATUSES = (STATUS_ACTIVE, STATUS_TRIALING, STATUS_TRIAL)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="subscriptions",
    )
    status = models.CharField(max_length=16, choices=STATUS_CHOICES)
    plan_code = models.CharField(max_length=50, blank=True, default="")

    started_at = models.DateTimeField(default=timezone.now)
    current_period_end = models.DateTimeField(blank=True, null=True)
    renews_at = models.DateTimeField(blank=True, null=True)
    canceled_at = models.DateTimeField(blank=True, null=True)

    provider = models.CharField(max_length=20, blank=True, default="")
    provider_ref = models.CharField(max_length=120, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    objects = SubscriptionQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.user_id}: {self.plan_code or '-'} ({self.status})"

    def save(self, *args, **kwargs) -> None:
        if isinstance(self.status, str):
            self.status = self.status.lower()
        super().save(*args, **kwargs)

    def is_active(self, now: datetime | None = None) -> bool:
        """
        Entitled status, not canceled, and the billing period has not ended.

        A cancellation dated in the future (cancel at period end) still counts
        as active until that moment.
        """
        now = now or timezone.now()

        if (self.status or "").lower() not in self.ENTITLED_STATUSES:
            return False
        if self.canceled_at and self.canceled_at <= now:
            return False

        period_end = self.current_period_end or self.renews_at
        if period_end and period_end <= now:
            return False
        return True
