from rest_framework.exceptions import ValidationError

from playgate_backend_app.exceptions import (
    InvalidPlaybackToken,
    SubscriptionRequired,
    api_exception_handler,
)


def test_handler_adds_error_code():
    resp = api_exception_handler(SubscriptionRequired(), {})
    assert resp.status_code == 402
    assert resp.data == {
        "detail": "Active subscription required.",
        "code": "subscription_required",
    }


def test_playback_error_is_generic():
    resp = api_exception_handler(InvalidPlaybackToken(), {})
    assert resp.status_code == 403
    assert resp.data["detail"] == "Invalid or expired token."


def test_validation_errors_left_untouched():
    resp = api_exception_handler(ValidationError({"user_code": ["required"]}), {})
    assert resp.status_code == 400
    assert "code" not in resp.data


def test_non_api_errors_are_not_handled():
    assert api_exception_handler(RuntimeError("boom"), {}) is None
