from datetime import timedelta

import pytest
from django.contrib.auth.models import AnonymousUser
from django.utils import timezone

from billing_app.models import Subscription
from playback_app.entitlements import check_access, has_active_subscription
from playgate_backend_app.exceptions import SubscriptionRequired


@pytest.mark.django_db
def test_free_video_is_open_to_everyone(free_video, user):
    check_access(free_video, None)
    check_access(free_video, AnonymousUser())
    check_access(free_video, user)


@pytest.mark.django_db
def test_premium_video_refuses_anonymous(premium_video):
    with pytest.raises(SubscriptionRequired):
        check_access(premium_video, None)
    with pytest.raises(SubscriptionRequired):
        check_access(premium_video, AnonymousUser())


@pytest.mark.django_db
def test_premium_video_refuses_user_without_subscription(premium_video, user):
    with pytest.raises(SubscriptionRequired):
        check_access(premium_video, user)


@pytest.mark.django_db
def test_premium_video_allows_active_subscriber(premium_video, user):
    Subscription.objects.create(user=user, status="active")
    check_access(premium_video, user)


@pytest.mark.django_db
def test_premium_video_refuses_canceled_subscriber(premium_video, user):
    Subscription.objects.create(
        user=user, status="active", canceled_at=timezone.now() - timedelta(minutes=1))
    with pytest.raises(SubscriptionRequired):
        check_access(premium_video, user)


@pytest.mark.django_db
def test_revocation_applies_to_the_next_check(premium_video, user):
    sub = Subscription.objects.create(user=user, status="active")
    check_access(premium_video, user)

    sub.status = "canceled"
    sub.save()

    with pytest.raises(SubscriptionRequired):
        check_access(premium_video, user)


@pytest.mark.django_db
def test_only_latest_subscription_counts(user):
    Subscription.objects.create(user=user, status="active")
    Subscription.objects.create(user=user, status="past_due")
    assert has_active_subscription(user.pk) is False


def test_no_user_id_is_never_entitled():
    assert has_active_subscription(None) is False
