"""
playback_app.entitlements — Premium gate in front of signed playback URLs.

Evaluated on every signing request and never cached: a cancellation or
failed payment stops new URLs from being minted immediately. URLs that
were already issued stay valid until their own expiry.
"""

import logging

from django.utils import timezone

from billing_app.models import Subscription
from playgate_backend_app.exceptions import SubscriptionRequired

logger = logging.getLogger(__name__)


def has_active_subscription(user_id, now=None):
    """True if the user's most recent subscription is currently active."""
    if not user_id:
        return False
    sub = Subscription.objects.latest_for_user(user_id)
    return bool(sub and sub.is_active(now or timezone.now()))


def check_access(video, user=None, now=None):
    """
    Allow free videos for everyone; premium videos only for subscribers.

    Raises:
        SubscriptionRequired (402): anonymous caller or no active subscription.
            Distinct from 401 so clients route to billing, not login.
    """
    if not video.is_premium:
        return

    user_id = user.pk if user is not None and user.is_authenticated else None
    if not has_active_subscription(user_id, now=now):
        logger.info("Premium video %s denied for user %s", video.pk, user_id or "anonymous")
        raise SubscriptionRequired()
