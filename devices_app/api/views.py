"""
Device pairing endpoints for the Playgate backend.

Implements the TV / set-top sign-in flow using:
- Django REST Framework (DRF) views + scoped throttles
- SimpleJWT for the session handed to the device
- RQ background task for purging old pairing records

Endpoints:
-----------
POST   /devices/pair/       → Device asks for a code pair (anonymous)
POST   /devices/activate/   → Signed-in user approves a user_code
GET    /devices/poll/       → Device polls with its device_code until linked
"""

import logging

from django.conf import settings
from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from django_rq import get_queue

from playgate_backend_app.exceptions import AlreadyConsumed
from users_app.api.serializers import DeviceUserSerializer
from .. import pairing
from ..models import DeviceLink
from ..tasks import purge_expired_device_links_task
from .serializers import (
    ActivateSerializer,
    PairRequestSerializer,
    PollQuerySerializer,
)

logger = logging.getLogger(__name__)


class DevicePairView(APIView):
    """
    POST /devices/pair/
    Body (optional): { "device_type": "android-tv" }

    Returns:
        201 { device_code, user_code, expires_at, poll_interval_seconds, verification_uri }

    Old pairing records are purged in the background on each call
    (inline when DEBUG, like the other RQ tasks).
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "device_pair"

    def post(self, request):
        ser = PairRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = pairing.request_pair(
            device_type=ser.validated_data.get("device_type"))
        self._schedule_purge()

        return Response(
            {
                "device_code": result.device_code,
                "user_code": result.user_code,
                "expires_at": result.expires_at.isoformat(),
                "poll_interval_seconds": result.poll_interval_seconds,
                "verification_uri": settings.DEVICE_VERIFICATION_URL,
            },
            status=status.HTTP_201_CREATED,
        )

    def _schedule_purge(self):
        try:
            if settings.DEBUG:
                purge_expired_device_links_task()
            else:
                get_queue("default").enqueue(purge_expired_device_links_task)
        except Exception as e:
            logger.exception("Pairing purge scheduling failed: %s", e)


class DeviceActivateView(APIView):
    """
    POST /devices/activate/
    Body: { "user_code": "ABC123" }   (case-insensitive, "abc-123" accepted)

    Links the pending device to the signed-in user.

    Returns:
        200 { "ok": true }
        401 not signed in
        404 unknown / expired code
        409 code already linked
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        ser = ActivateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        pairing.activate(ser.validated_data["user_code"], request.user)
        return Response({"ok": True}, status=status.HTTP_200_OK)


class DevicePollView(APIView):
    """
    GET /devices/poll/?device_code=<code>

    Returns:
        200 { "status": "pending", "poll_interval_seconds": 5 }
        200 { "status": "expired" }
        200 { "status": "linked", "session_token": "<jwt>", "user": {id, name, email} }
        404 unknown device_code

    A linked record is consumed by the poll that delivers its session;
    a poll that loses that race is answered as "expired".
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "device_poll"

    @method_decorator(never_cache)
    def get(self, request):
        ser = PollQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)

        try:
            result = pairing.poll(ser.validated_data["device_code"])
        except AlreadyConsumed:
            return Response({"status": DeviceLink.STATUS_EXPIRED})

        if result.status == DeviceLink.STATUS_PENDING:
            return Response(
                {
                    "status": result.status,
                    "poll_interval_seconds": pairing.poll_interval(),
                }
            )

        if result.status == DeviceLink.STATUS_EXPIRED:
            return Response({"status": result.status})

        return Response(
            {
                "status": result.status,
                "session_token": result.session_token,
                "user": DeviceUserSerializer(result.user).data,
            }
        )
