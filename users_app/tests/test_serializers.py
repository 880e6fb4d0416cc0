import pytest

from users_app.api.serializers import DeviceUserSerializer


@pytest.mark.django_db
def test_device_user_exposes_only_identity(user_active):
    data = DeviceUserSerializer(user_active).data
    assert set(data) == {"id", "name", "email"}
    assert data["email"] == "active@example.com"


@pytest.mark.django_db
def test_name_prefers_display_name_then_full_name(user_active):
    assert DeviceUserSerializer(user_active).data["name"] == "active@example.com"

    user_active.first_name = "Ada"
    user_active.last_name = "Lovelace"
    assert DeviceUserSerializer(user_active).data["name"] == "Ada Lovelace"

    user_active.display_name = "Ada L."
    assert DeviceUserSerializer(user_active).data["name"] == "Ada L."
