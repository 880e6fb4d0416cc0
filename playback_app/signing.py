"""
playback_app.signing — HMAC-signed, time-bounded playback tokens.

A token is the pair (exp, sig) carried in a playback URL's query string:

    sig = base64url(HMAC-SHA256(secret, "<playback_id>:<exp>:<user_id|anon>"))

Nothing is stored server-side: the gateway recomputes the signature from
the URL and the process-wide secret. Any failure (bad signature, other
playback id, other user, expired) is reported the same way.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
import time
from dataclasses import dataclass
from typing import Callable

from django.conf import settings

from playgate_backend_app.exceptions import InvalidPlaybackToken

ANONYMOUS_SUBJECT = "anon"
EXPIRY_RE = re.compile(r"[0-9]{1,12}")


@dataclass(frozen=True)
class SignedToken:
    expiry: int
    signature: str


def _b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


class PlaybackSigner:
    """
    Signs and verifies playback tokens with a fixed secret.

    Args:
        secret_key: HMAC key (str or bytes). Rotating it invalidates all
            outstanding tokens.
        clock: returns the current unix time in seconds; injectable for tests.
    """

    def __init__(self, secret_key: str | bytes, clock: Callable[[], float] = time.time):
        if not secret_key:
            raise ValueError("Playback signing requires a non-empty secret key.")
        if isinstance(secret_key, str):
            secret_key = secret_key.encode("utf-8")
        self._key = secret_key
        self._clock = clock

    def now(self) -> int:
        return int(self._clock())

    def _signature(self, playback_id: str, expiry: str, user_id=None) -> str:
        subject = ANONYMOUS_SUBJECT if user_id in (None, "") else str(user_id)
        message = f"{playback_id}:{expiry}:{subject}".encode("utf-8")
        return _b64url(hmac.new(self._key, message, hashlib.sha256).digest())

    def sign(self, playback_id: str, ttl_seconds: int, user_id=None) -> SignedToken:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive.")
        expiry = self.now() + int(ttl_seconds)
        return SignedToken(
            expiry=expiry,
            signature=self._signature(playback_id, str(expiry), user_id),
        )

    def verify(self, playback_id, expiry, signature, user_id=None) -> None:
        """
        Raise InvalidPlaybackToken unless the token is authentic and unexpired.

        `expiry` is checked in the exact textual form received (digits only),
        so "+123", " 123" or "0123" never verify against a token signed for 123.
        """
        if not playback_id or expiry is None or not signature:
            raise InvalidPlaybackToken()

        expiry_text = str(expiry)
        if not EXPIRY_RE.fullmatch(expiry_text):
            raise InvalidPlaybackToken()

        expected = self._signature(str(playback_id), expiry_text, user_id)
        signature_ok = hmac.compare_digest(
            expected.encode("ascii"), str(signature).encode("utf-8"))

        if not signature_ok or self.now() > int(expiry_text):
            raise InvalidPlaybackToken()

    def is_valid(self, playback_id, expiry, signature, user_id=None) -> bool:
        try:
            self.verify(playback_id, expiry, signature, user_id)
        except InvalidPlaybackToken:
            return False
        return True


def get_playback_signer() -> PlaybackSigner:
    """Signer configured from PLAYBACK_TOKEN_SECRET."""
    return PlaybackSigner(settings.PLAYBACK_TOKEN_SECRET)
