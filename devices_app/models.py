"""
devices_app.models — Pairing records for TV / set-top device sign-in.

A DeviceLink is created when a device asks to pair and moves through:

    pending ──(user enters code on the web)──▶ linked ──(device polls)──▶ expired

Transitions are forward only. Once `expires_at` has passed the record
reads as expired regardless of the stored status; nothing rewrites it.
"""

from __future__ import annotations

from datetime import datetime

from django.conf import settings
from django.db import models
from django.utils import timezone


class DeviceLink(models.Model):
    STATUS_PENDING = "pending"
    STATUS_LINKED = "linked"
    STATUS_EXPIRED = "expired"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_LINKED, "Linked"),
        (STATUS_EXPIRED, "Expired"),
    ]

    device_code = models.CharField(
        max_length=64,
        unique=True,
        help_text="Secret polled by the device. Never shown to a human.",
    )
    user_code = models.CharField(
        max_length=6,
        unique=True,
        help_text="Short code the user types on the activation page.",
    )
    status = models.CharField(
        max_length=10,
        choices=STATUS_CHOICES,
        default=STATUS_PENDING,
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="device_links",
        blank=True,
        null=True,
    )
    device_type = models.CharField(max_length=64, blank=True, default="")

    created_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(db_index=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.user_code} ({self.status})"

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or timezone.now()
        return self.status == self.STATUS_EXPIRED or self.expires_at <= now
