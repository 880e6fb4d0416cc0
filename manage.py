"""Playgate backend command-line utility (runserver, migrate, rqworker, ...)."""
import os
import sys

# Local runs pick up .env.dev, then .env, unless ENV_FILE is already set.
if not os.getenv("ENV_FILE"):
    for candidate in (".env.dev", ".env"):
        if os.path.exists(candidate):
            os.environ["ENV_FILE"] = candidate
            break


def main():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE",
                          "playgate_backend_app.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed and is the "
            "virtual environment active?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
