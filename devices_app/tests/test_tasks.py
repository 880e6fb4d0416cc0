from datetime import timedelta

import pytest
from django.utils import timezone

from devices_app.models import DeviceLink
from devices_app.tasks import purge_expired_device_links_task


def make_link(code, expires_at):
    return DeviceLink.objects.create(
        device_code=f"device-{code}",
        user_code=code,
        expires_at=expires_at,
    )


@pytest.mark.django_db
def test_purge_keeps_records_inside_retention_window():
    now = timezone.now()
    fresh = make_link("FRESH2", now + timedelta(minutes=5))
    recently_expired = make_link("RECENT", now - timedelta(hours=1))
    old = make_link("OLDOLD", now - timedelta(hours=25))

    deleted = purge_expired_device_links_task(retention_hours=24, now=now)

    assert deleted == 1
    remaining = set(DeviceLink.objects.values_list("pk", flat=True))
    assert remaining == {fresh.pk, recently_expired.pk}
    assert old.pk not in remaining


@pytest.mark.django_db
def test_purge_uses_retention_setting(settings):
    settings.DEVICE_LINK_RETENTION_HOURS = 0
    make_link("GONE22", timezone.now() - timedelta(seconds=5))

    assert purge_expired_device_links_task() == 1
    assert DeviceLink.objects.count() == 0
