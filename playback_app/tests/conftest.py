import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from content_app.models import Video


@pytest.fixture
def api():
    """Unauthenticated DRF API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username="tester@example.com",
        email="tester@example.com",
        password="pass1234",
        is_active=True,
    )


@pytest.fixture
def auth_api(user):
    """Authenticated API client."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def free_video(db):
    return Video.objects.create(
        title="Free Video",
        hls_url="https://livepeercdn.com/hls/free123/index.m3u8",
        thumbnail_url="https://img.example.com/free.jpg",
    )


@pytest.fixture
def premium_video(db):
    return Video.objects.create(
        title="Premium Video",
        is_premium=True,
        hls_url="https://livepeercdn.com/hls/prem456/index.m3u8",
    )


class FakeClock:
    """Settable unix-time source for PlaybackSigner."""

    def __init__(self, now=1_700_000_000):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()
