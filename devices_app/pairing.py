"""
devices_app.pairing — Device-code pairing protocol (TV / set-top sign-in).

Flow:
1) request_pair()  — the device gets a secret device_code and a short user_code.
2) activate()      — a signed-in user types the user_code on the web; pending → linked.
3) poll()          — the device polls with its device_code; the first poll that
                     sees the record linked consumes it (linked → expired) and
                     receives a session. Later polls see "expired".

Both state transitions are conditional UPDATEs (`... WHERE status = <expected>`);
the affected row count decides which caller won, so concurrent activations or
polls can never bind a code twice or mint two sessions from one record.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone

from playgate_backend_app.exceptions import (
    AlreadyConsumed,
    AlreadyLinked,
    PairingNotFound,
    PairingUnavailable,
)
from .models import DeviceLink
from .sessions import issue_session

logger = logging.getLogger(__name__)

# No 0/O or 1/I: users read these off a TV screen.
USER_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
USER_CODE_LENGTH = 6
DEVICE_CODE_BYTES = 32
MAX_CODE_ATTEMPTS = 5


@dataclass
class PairResult:
    device_code: str
    user_code: str
    expires_at: datetime
    poll_interval_seconds: int


@dataclass
class PollResult:
    status: str
    session_token: Optional[str] = None
    user: Any = None


def code_ttl() -> timedelta:
    return timedelta(minutes=getattr(settings, "DEVICE_CODE_TTL_MINUTES", 10))


def poll_interval() -> int:
    return getattr(settings, "DEVICE_POLL_INTERVAL_SECONDS", 5)


def generate_device_code() -> str:
    """256 bits, URL-safe."""
    return secrets.token_urlsafe(DEVICE_CODE_BYTES)


def generate_user_code() -> str:
    return "".join(
        secrets.choice(USER_CODE_ALPHABET) for _ in range(USER_CODE_LENGTH)
    )


def normalize_user_code(raw) -> str:
    """Accepts ' abc-def ' style input; codes are stored upper-case."""
    return "".join(str(raw or "").split()).replace("-", "").upper()


def request_pair(device_type: str | None = None, now: datetime | None = None) -> PairResult:
    """
    Create a pending pairing record valid for DEVICE_CODE_TTL_MINUTES.

    Regenerates both codes when either collides with a stored record and
    raises PairingUnavailable after MAX_CODE_ATTEMPTS collisions.
    """
    now = now or timezone.now()
    expires_at = now + code_ttl()

    for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
        try:
            with transaction.atomic():
                link = DeviceLink.objects.create(
                    device_code=generate_device_code(),
                    user_code=generate_user_code(),
                    device_type=device_type or "",
                    created_at=now,
                    expires_at=expires_at,
                )
        except IntegrityError:
            logger.warning(
                "Pairing code collision (attempt %s/%s), regenerating",
                attempt,
                MAX_CODE_ATTEMPTS,
            )
            continue

        logger.info(
            "Pairing %s created (device type: %s)",
            link.user_code,
            link.device_type or "-",
        )
        return PairResult(
            device_code=link.device_code,
            user_code=link.user_code,
            expires_at=link.expires_at,
            poll_interval_seconds=poll_interval(),
        )

    logger.error("Could not allocate a unique pairing code after %s attempts",
                 MAX_CODE_ATTEMPTS)
    raise PairingUnavailable()


def activate(user_code, user, now: datetime | None = None) -> DeviceLink:
    """
    Bind a pending, unexpired record to `user` (pending → linked).

    Raises:
        AlreadyLinked: the code was already approved and not yet consumed.
        PairingNotFound: unknown, expired or already consumed code.
    """
    now = now or timezone.now()
    code = normalize_user_code(user_code)
    if not code:
        raise PairingNotFound()

    updated = DeviceLink.objects.filter(
        user_code=code,
        status=DeviceLink.STATUS_PENDING,
        expires_at__gt=now,
    ).update(status=DeviceLink.STATUS_LINKED, user=user)

    if not updated:
        link = DeviceLink.objects.filter(user_code=code).first()
        if (
            link is not None
            and link.status == DeviceLink.STATUS_LINKED
            and not link.is_expired(now)
        ):
            raise AlreadyLinked()
        raise PairingNotFound()

    logger.info("Pairing %s linked to user %s", code, user.pk)
    return DeviceLink.objects.get(user_code=code)


def poll(device_code, now: datetime | None = None) -> PollResult:
    """
    Report the state of a pairing to the device.

    pending → PollResult("pending"); expired (by time or consumption) →
    PollResult("expired"); linked → consumed here, PollResult("linked") with
    a session. Raises PairingNotFound for unknown codes.
    """
    now = now or timezone.now()
    link = DeviceLink.objects.filter(device_code=str(device_code or "")).first()
    if link is None:
        raise PairingNotFound()

    if link.is_expired(now):
        return PollResult(status=DeviceLink.STATUS_EXPIRED)
    if link.status == DeviceLink.STATUS_PENDING:
        return PollResult(status=DeviceLink.STATUS_PENDING)

    return consume(link, now=now)


def consume(link: DeviceLink, now: datetime | None = None) -> PollResult:
    """
    Single consumption point: linked → expired, then mint the session.

    `link` may be a stale snapshot; only the caller whose UPDATE matched the
    row while it was still linked gets a session. Everyone else gets
    AlreadyConsumed.
    """
    now = now or timezone.now()

    with transaction.atomic():
        won = DeviceLink.objects.filter(
            pk=link.pk,
            status=DeviceLink.STATUS_LINKED,
            expires_at__gt=now,
        ).update(status=DeviceLink.STATUS_EXPIRED)
        if not won:
            raise AlreadyConsumed()

        user = get_user_model().objects.get(pk=link.user_id)
        token = issue_session(user, link.device_type)

    logger.info("Pairing %s consumed, session issued to user %s",
                link.user_code, user.pk)
    return PollResult(
        status=DeviceLink.STATUS_LINKED,
        session_token=token,
        user=user,
    )
