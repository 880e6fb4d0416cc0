"""
content_app.models — Video descriptor for Playgate backend.

The catalog itself is managed elsewhere; this model carries only what
playback needs:
- is_premium: gates access behind an active subscription
- hls_url: upstream HLS master manifest (e.g. Livepeer CDN)
- playback_id: derived from hls_url, signed into playback URLs
"""

from __future__ import annotations

import re

from django.db import models


LIST_OF_GENRES = [
    ("Action", "Action"),
    ("Comedy", "Comedy"),
    ("Documentary", "Documentary"),
    ("Drama", "Drama"),
    ("Educational", "Educational"),
    ("Fitness", "Fitness"),
    ("Live", "Live"),
    ("Music", "Music"),
    ("Sports", "Sports"),
    ("Other", "Other"),
]

# https://livepeercdn.com/hls/<playback_id>/index.m3u8
# Ids are limited to the gateway route's slug characters; ":" separates
# fields in the signed message.
PLAYBACK_ID_RE = re.compile(r"/hls/([A-Za-z0-9_-]+)/index\.m3u8", re.IGNORECASE)


def parse_playback_id(url: str | None) -> str | None:
    if not url:
        return None
    match = PLAYBACK_ID_RE.search(url)
    return match.group(1) if match else None


class Video(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)

    title = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, default="")

    category = models.CharField(
        max_length=50,
        choices=LIST_OF_GENRES,
        blank=True,
        null=True,
    )

    is_premium = models.BooleanField(
        default=False,
        help_text="Premium videos require an active subscription to play.",
    )

    hls_url = models.URLField(
        max_length=500,
        blank=True,
        default="",
        help_text="Upstream HLS master manifest URL.",
    )

    thumbnail_url = models.URLField(
        max_length=500,
        blank=True,
        default="",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        ts = self.created_at.strftime(
            "%Y-%m-%d %H:%M:%S") if self.created_at else "—"
        return f"({self.id}) {self.title} ({ts})"

    @property
    def playback_id(self) -> str | None:
        return parse_playback_id(self.hls_url)
