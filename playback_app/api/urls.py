"""
playback_app.urls — Watch + signed playback routes

Includes:
- Watch info with a signed, short-lived HLS URL
- The gateway that verifies the signature and redirects to the CDN
"""

from django.urls import path
from .views import WatchView, hls_manifest

urlpatterns = [
    path("watch/<int:pk>/", WatchView.as_view(), name="watch"),
    path("play/hls/<slug:playback_id>/index.m3u8", hls_manifest, name="hls-manifest"),
]
