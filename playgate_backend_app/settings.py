"""
Django settings for the Playgate backend.

- Auto ENV selection via ENV_FILE (.env.dev / .env.prod)
- Auto DB selection → DEBUG=True or no DB_NAME → SQLite, otherwise PostgreSQL
- SimpleJWT (cookie or Bearer auth; device sessions are long-lived access tokens)
- RQ worker + Redis config with auto-switch (localhost ↔ redis)
- Device pairing + signed playback settings
"""

import os
from pathlib import Path
from datetime import timedelta
import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env()
env_file = os.getenv("ENV_FILE", ".env.dev")

if not os.path.isabs(env_file):
    env_file = os.path.join(BASE_DIR, env_file)

if os.path.exists(env_file):
    environ.Env.read_env(env_file)

DEBUG = env.bool("DEBUG", default=False)
SECRET_KEY = env.str("SECRET_KEY", default="dev-secret")

ALLOWED_HOSTS = env.list(
    "ALLOWED_HOSTS",
    default=["localhost", "127.0.0.1"]
)

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    "rest_framework",
    "corsheaders",
    "django_rq",
    "import_export",

    "users_app",
    "content_app",
    "billing_app",
    "devices_app",
    "playback_app",
]

if DEBUG:
    INSTALLED_APPS.append("debug_toolbar")


AUTH_USER_MODEL = "users_app.UserProfile"

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

if DEBUG:
    MIDDLEWARE.insert(1, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = ["127.0.0.1"]


ROOT_URLCONF = "playgate_backend_app.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "playgate_backend_app.wsgi.application"

DB_NAME = env.str("DB_NAME", default="")
DB_SSL_REQUIRE = env.bool("DB_SSL_REQUIRE", default=False)
DB_SSL_ROOTCERT = env.str("DB_SSL_ROOTCERT", default="")

if DEBUG or not DB_NAME:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }
else:
    options = {}
    if DB_SSL_REQUIRE:
        options["sslmode"] = "require"
        if DB_SSL_ROOTCERT:
            options["sslrootcert"] = DB_SSL_ROOTCERT

    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": DB_NAME,
            "USER": env("DB_USER"),
            "PASSWORD": env("DB_PASSWORD"),
            "HOST": env("DB_HOST"),
            "PORT": env.int("DB_PORT", default=5432),
            "OPTIONS": options,
        }
    }


REDIS_URL = env.str("REDIS_URL", default="")

if REDIS_URL:
    RQ_QUEUES = {"default": {"URL": REDIS_URL, "DEFAULT_TIMEOUT": 360}}
else:
    RQ_QUEUES = {
        "default": {
            "HOST": env("REDIS_HOST", default=("localhost" if DEBUG else "redis")),
            "PORT": env.int("REDIS_PORT", default=6379),
            "DB": env.int("REDIS_DB", default=0),
            "DEFAULT_TIMEOUT": 360,
        }
    }


# Throttle counters for the pairing endpoints live in this cache.
CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": env(
            "REDIS_LOCATION",
            default=(
                "redis://localhost:6379/0" if DEBUG else "redis://redis:6379/0"),
        ),
        "OPTIONS": {"CLIENT_CLASS": "django_redis.client.DefaultClient"},
        "KEY_PREFIX": "playgate",
    }
}

STATIC_URL = "/static/"
STATIC_ROOT = os.path.join(BASE_DIR, "staticfiles")


REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "users_app.api.authentication.CookieJWTAuthentication",
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.AnonRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "anon": env.str("THROTTLE_ANON_RATE", default="60/min"),
        "device_pair": env.str("THROTTLE_DEVICE_PAIR_RATE", default="10/min"),
        "device_poll": env.str("THROTTLE_DEVICE_POLL_RATE", default="30/min"),
    },
    "EXCEPTION_HANDLER": "playgate_backend_app.exceptions.api_exception_handler",
}

CORS_ALLOWED_ORIGINS = env.list(
    "CORS_ALLOWED_ORIGINS",
    default=["http://localhost:4200", "http://127.0.0.1:4200"]
)
CORS_ALLOW_CREDENTIALS = env.bool("CORS_ALLOW_CREDENTIALS", default=True)

CSRF_TRUSTED_ORIGINS = env.list(
    "CSRF_TRUSTED_ORIGINS",
    default=["http://localhost:4200", "http://127.0.0.1:4200"]
)

JWT_ACCESS_COOKIE_NAME = env("JWT_ACCESS_COOKIE_NAME", default="pg_access")

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=5),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=7),
    "SIGNING_KEY": SECRET_KEY,
    "AUTH_HEADER_TYPES": ("Bearer",),
}

# -----------------------------
# Device pairing
# -----------------------------
DEVICE_CODE_TTL_MINUTES = env.int("DEVICE_CODE_TTL_MINUTES", default=10)
DEVICE_POLL_INTERVAL_SECONDS = env.int(
    "DEVICE_POLL_INTERVAL_SECONDS", default=5)
DEVICE_SESSION_LIFETIME_DAYS = env.int(
    "DEVICE_SESSION_LIFETIME_DAYS", default=30)
DEVICE_LINK_RETENTION_HOURS = env.int(
    "DEVICE_LINK_RETENTION_HOURS", default=24)
DEVICE_VERIFICATION_URL = env(
    "DEVICE_VERIFICATION_URL", default="http://localhost:4200/activate")

# -----------------------------
# Signed playback
# -----------------------------
PLAYBACK_TOKEN_SECRET = env.str("PLAYBACK_TOKEN_SECRET", default=SECRET_KEY)
PLAYBACK_TOKEN_TTL_SECONDS = env.int(
    "PLAYBACK_TOKEN_TTL_SECONDS", default=3600)
HLS_CDN_BASE = env.str("HLS_CDN_BASE", default="https://livepeercdn.com/hls")

LOG_LEVEL = env.str("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": env.str("DJANGO_LOG_LEVEL", default="WARNING"),
            "propagate": False,
        },
    },
}

if DEBUG:
    SESSION_COOKIE_SECURE = False
    CSRF_COOKIE_SECURE = False
else:
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
    SECURE_HSTS_SECONDS = 31536000
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True
