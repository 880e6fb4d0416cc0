from django.apps import AppConfig


class PlaybackAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "playback_app"
    verbose_name = "Playback"
