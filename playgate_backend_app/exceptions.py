"""
playgate_backend_app.exceptions — API error taxonomy for device pairing and playback.

Every failure of the core maps to one of these classes so clients can act on it:
- pairing errors   → restart pairing
- 402              → send the user to the billing flow (not the login flow)
- playback 403     → generic playback error, no detail on which check failed

`api_exception_handler` is wired in REST_FRAMEWORK["EXCEPTION_HANDLER"] and
adds the machine-readable `code` next to DRF's `detail`.
"""

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler


class PairingNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Code not found or expired."
    default_code = "pairing_not_found"


class AlreadyLinked(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This code has already been used to link a device."
    default_code = "already_linked"


class AlreadyConsumed(APIException):
    """Raised to the losing caller when two polls race on the same linked record."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "This pairing is no longer available. Start pairing again."
    default_code = "already_consumed"


class PairingUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Could not allocate a pairing code. Try again."
    default_code = "pairing_unavailable"


class InvalidPlaybackToken(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token."
    default_code = "invalid_playback_token"


class SubscriptionRequired(APIException):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    default_detail = "Active subscription required."
    default_code = "subscription_required"


def api_exception_handler(exc, context):
    """
    DRF exception handler: default rendering + `code` for single-message errors.

    Validation errors (dict/list details) are left untouched.
    """
    response = exception_handler(exc, context)
    if response is None:
        return response

    detail = getattr(exc, "detail", None)
    code = getattr(detail, "code", None)
    if code and isinstance(response.data, dict) and "detail" in response.data:
        response.data["code"] = code
    return response
