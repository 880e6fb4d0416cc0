"""
playback_app.api.views — Watch + signed playback gateway.

Provides:
- WatchView: entitlement check, then a short-lived signed HLS URL for a video.
- hls_manifest: verifies the signed URL and redirects to the upstream CDN.
"""

import logging
from datetime import datetime, timezone as dt_timezone
from urllib.parse import urlencode

from django.conf import settings
from django.http import Http404, HttpResponseForbidden, HttpResponseRedirect
from django.urls import reverse
from django.views.decorators.http import require_GET

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from content_app.models import Video
from playgate_backend_app.exceptions import InvalidPlaybackToken
from ..entitlements import check_access
from ..signing import get_playback_signer

logger = logging.getLogger(__name__)


def build_playback_url(request, playback_id, token, user_id=None):
    """
    Absolute gateway URL for a signed token.

    `uid` is included for user-bound tokens so the gateway can recompute
    the signature.
    """
    path = reverse("hls-manifest", kwargs={"playback_id": playback_id})
    params = {"exp": token.expiry, "sig": token.signature}
    if user_id:
        params["uid"] = user_id
    return f"{request.build_absolute_uri(path)}?{urlencode(params)}"


# ==========================
# WATCH
# ==========================
class WatchView(APIView):
    """
    GET /watch/<pk>/

    Open to anonymous callers; premium videos require an active subscription.
    A valid session (cookie or Bearer) binds the signed URL to the user.

    Returns:
        - 200 with the tokenized HLS URL.
        - 401 if a session was sent but is invalid.
        - 402 if the video is premium and the caller is not entitled.
        - 404 if the video is unknown or has no playable source.
    """
    permission_classes = [AllowAny]

    def get(self, request, pk):
        try:
            video = Video.objects.get(pk=pk)
        except Video.DoesNotExist:
            raise Http404("Video not found")

        check_access(video, request.user)

        playback_id = video.playback_id
        if not playback_id:
            raise Http404("Playback not available")

        user_id = request.user.pk if request.user.is_authenticated else None
        token = get_playback_signer().sign(
            playback_id,
            settings.PLAYBACK_TOKEN_TTL_SECONDS,
            user_id=user_id,
        )
        expires_at = datetime.fromtimestamp(token.expiry, tz=dt_timezone.utc)

        return Response(
            {
                "id": video.id,
                "title": video.title,
                "is_premium": video.is_premium,
                "tokenized_hls_url": build_playback_url(
                    request, playback_id, token, user_id),
                "expires_at": expires_at.isoformat(),
                "subtitles": [],
                "thumbnails": {"poster": video.thumbnail_url or None},
            }
        )


# ==========================
# GATEWAY
# ==========================
@require_GET
def hls_manifest(request, playback_id):
    """
    GET /play/hls/<playback_id>/index.m3u8?exp=<unix>&sig=<sig>[&uid=<id>]

    Valid token → 302 to the upstream master manifest.
    Anything else → 403 with a generic message.
    """
    try:
        get_playback_signer().verify(
            playback_id,
            request.GET.get("exp"),
            request.GET.get("sig"),
            user_id=request.GET.get("uid"),
        )
    except InvalidPlaybackToken:
        logger.info("Rejected playback token for %s", playback_id)
        return HttpResponseForbidden(
            "Invalid or expired token", content_type="text/plain")

    target = f"{settings.HLS_CDN_BASE.rstrip('/')}/{playback_id}/index.m3u8"
    response = HttpResponseRedirect(target)
    response["Cache-Control"] = "private, max-age=0, no-store"
    return response
