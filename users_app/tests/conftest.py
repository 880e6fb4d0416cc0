import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient


# --------------------------------------------------------------------------
# DRF test client
# --------------------------------------------------------------------------
@pytest.fixture
def api():
    """Provides a DRF APIClient instance for making HTTP requests in tests."""
    return APIClient()


# --------------------------------------------------------------------------
# User model fixture
# --------------------------------------------------------------------------
@pytest.fixture
def User():
    """Returns the active Django user model."""
    return get_user_model()


@pytest.fixture
def user_active(db, User):
    """Creates an active user."""
    return User.objects.create_user(
        username="active@example.com",
        email="active@example.com",
        password="pass1234",
        is_active=True,
    )


# --------------------------------------------------------------------------
# Throttle counters live in the cache; start every test from zero
# --------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()
