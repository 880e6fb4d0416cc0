"""
devices_app.tasks — Housekeeping for pairing records (django-rq).

Expired records are already inert (they read as expired on every lookup);
this only keeps the table small. Enqueue with:
    from django_rq import get_queue
    get_queue("default").enqueue(purge_expired_device_links_task)
"""

import logging
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from .models import DeviceLink

logger = logging.getLogger(__name__)


def purge_expired_device_links_task(retention_hours=None, now=None):
    """
    Delete pairing records whose expiry is older than the retention window.

    Args:
        retention_hours (int | None): defaults to DEVICE_LINK_RETENTION_HOURS.
        now (datetime | None): reference time, defaults to timezone.now().

    Returns:
        int: number of deleted records.
    """
    if retention_hours is None:
        retention_hours = getattr(settings, "DEVICE_LINK_RETENTION_HOURS", 24)
    now = now or timezone.now()
    cutoff = now - timedelta(hours=retention_hours)

    deleted, _ = DeviceLink.objects.filter(expires_at__lt=cutoff).delete()
    if deleted:
        logger.info("Purged %s pairing records expired before %s",
                    deleted, cutoff.isoformat())
    return deleted
