import pytest
from django.contrib.auth import get_user_model


@pytest.fixture
def subscriber(db):
    return get_user_model().objects.create_user(
        username="sub@example.com",
        email="sub@example.com",
        password="pass1234",
    )
