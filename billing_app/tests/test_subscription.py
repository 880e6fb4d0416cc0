from datetime import timedelta

import pytest
from django.utils import timezone

from billing_app.models import Subscription


@pytest.mark.django_db
@pytest.mark.parametrize("status", ["active", "trialing", "trial", "ACTIVE"])
def test_entitled_statuses_are_active(subscriber, status):
    sub = Subscription.objects.create(user=subscriber, status=status)
    assert sub.is_active()


@pytest.mark.django_db
@pytest.mark.parametrize("status", ["past_due", "canceled"])
def test_other_statuses_are_inactive(subscriber, status):
    sub = Subscription.objects.create(user=subscriber, status=status)
    assert not sub.is_active()


@pytest.mark.django_db
def test_status_is_stored_lowercase(subscriber):
    sub = Subscription.objects.create(user=subscriber, status="Trialing")
    sub.refresh_from_db()
    assert sub.status == "trialing"


@pytest.mark.django_db
def test_cancellation_takes_effect_at_canceled_at(subscriber):
    now = timezone.now()
    sub = Subscription.objects.create(
        user=subscriber, status="active", canceled_at=now + timedelta(days=3))

    assert sub.is_active(now)
    assert not sub.is_active(now + timedelta(days=3))


@pytest.mark.django_db
def test_period_end_limits_activity(subscriber):
    now = timezone.now()
    sub = Subscription.objects.create(
        user=subscriber, status="active", current_period_end=now + timedelta(hours=1))
    assert sub.is_active(now)
    assert not sub.is_active(now + timedelta(hours=2))


@pytest.mark.django_db
def test_renews_at_used_when_no_period_end(subscriber):
    now = timezone.now()
    sub = Subscription.objects.create(
        user=subscriber, status="active", renews_at=now - timedelta(minutes=1))
    assert not sub.is_active(now)


@pytest.mark.django_db
def test_latest_for_user_returns_newest_row(subscriber):
    older = Subscription.objects.create(user=subscriber, status="active")
    newer = Subscription.objects.create(user=subscriber, status="canceled")

    assert Subscription.objects.latest_for_user(subscriber.pk) == newer
    assert older != newer


@pytest.mark.django_db
def test_latest_for_user_without_rows(subscriber):
    assert Subscription.objects.latest_for_user(subscriber.pk) is None
