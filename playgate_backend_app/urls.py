"""
playgate_backend_app.urls

Main URL configuration for the Playgate backend.

This file defines all top-level URL routes, including:
- Health endpoint
- Admin panel
- Django RQ dashboard
- Device pairing API (devices_app)
- Watch + signed playback gateway (playback_app)
- Debug toolbar (only active when DEBUG=True)
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from . import views


# ----------------------------------------------------------------------
# 1. Core URL patterns
# ----------------------------------------------------------------------
urlpatterns = [
    # basic health endpoint
    path("health/", views.health_check, name="health-check"),
    path("admin/", admin.site.urls),                          # Django admin
    path("django-rq/", include("django_rq.urls")
         ),             # Redis Queue dashboard
    path("devices/", include("devices_app.api.urls")
         ),             # TV / set-top pairing
    path("", include("playback_app.api.urls")),   # /watch/ + /play/
]

# ----------------------------------------------------------------------
# 2. Development mode: debug toolbar
# ----------------------------------------------------------------------
if settings.DEBUG:
    import debug_toolbar

    urlpatterns += [path("__debug__/", include(debug_toolbar.urls))]
