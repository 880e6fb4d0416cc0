"""
devices_app.sessions — Session credentials for paired devices.

A device session is a SimpleJWT access token with a long lifetime
(DEVICE_SESSION_LIFETIME_DAYS). It is accepted by the same
JWTAuthentication that guards the rest of the API. There is no refresh:
when it expires the device pairs again.
"""

from datetime import timedelta

from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken


def session_lifetime() -> timedelta:
    return timedelta(days=getattr(settings, "DEVICE_SESSION_LIFETIME_DAYS", 30))


def issue_session(user, device_type: str | None = None) -> str:
    """
    Mint a device session for `user`.

    Claims: the standard SimpleJWT ones (user_id, exp, jti, token_type)
    plus `device_type` when the device reported one.
    """
    token = AccessToken.for_user(user)
    token.set_exp(lifetime=session_lifetime())
    if device_type:
        token["device_type"] = device_type
    return str(token)
