"""
devices_app.urls — API routes for device pairing
"""

from django.urls import path
from .views import (
    DevicePairView,
    DeviceActivateView,
    DevicePollView,
)

urlpatterns = [
    path("pair/", DevicePairView.as_view(), name="device-pair"),
    path("activate/", DeviceActivateView.as_view(), name="device-activate"),
    path("poll/", DevicePollView.as_view(), name="device-poll"),
]
