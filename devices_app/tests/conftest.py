import copy

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.db.models.query import QuerySet
from rest_framework.test import APIClient

from devices_app.models import DeviceLink


# --------------------------------------------------------------------------
# DRF test clients
# --------------------------------------------------------------------------
@pytest.fixture
def api():
    """Unauthenticated client (the TV)."""
    return APIClient()


@pytest.fixture
def web_api(user):
    """Client of a signed-in user on the activation page."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


# --------------------------------------------------------------------------
# Users
# --------------------------------------------------------------------------
@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username="viewer@example.com",
        email="viewer@example.com",
        password="pass1234",
        display_name="Viewer",
    )


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(
        username="other@example.com",
        email="other@example.com",
        password="pass1234",
    )


# --------------------------------------------------------------------------
# Mock RQ queue – replaces the real Redis connection during tests
# --------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _mock_rq_queue(monkeypatch):
    """Records enqueue calls instead of talking to Redis."""
    class DummyQueue:
        def __init__(self):
            self.calls = []

        def enqueue(self, fn, *args, **kwargs):
            self.calls.append((getattr(fn, "__name__", str(fn)), args, kwargs))

    q = DummyQueue()
    monkeypatch.setattr("devices_app.api.views.get_queue", lambda *a, **k: q)
    return q


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


# --------------------------------------------------------------------------
# Concurrent polls – every poll reads the record before any of them writes
# --------------------------------------------------------------------------
@pytest.fixture
def stale_poll_reads(monkeypatch):
    """
    Pins the record returned to pairing.poll() to a snapshot taken now,
    so sequential polls behave like N devices that all read it while linked.
    """
    def freeze(device_code):
        snapshot = DeviceLink.objects.get(device_code=device_code)
        real_first = QuerySet.first

        def first(qs):
            if qs.model is DeviceLink:
                return copy.copy(snapshot)
            return real_first(qs)

        monkeypatch.setattr(QuerySet, "first", first)

    return freeze
