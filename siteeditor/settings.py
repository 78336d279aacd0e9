"""
Django settings for the siteeditor project.

Values that differ between a developer machine, CI and the browser suite are
read from environment variables so the same module serves all three.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name, default):
    value = os.environ.get(name, "").strip()
    return int(value) if value else default


SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-siteeditor-development-key"
)
DEBUG = _env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "reversion",
    "siteconfig",
    "editor",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "siteeditor.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "siteeditor" / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "siteeditor.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

LOGIN_URL = "/login/"
LOGIN_REDIRECT_URL = "/site-admin/admin.php?page=site-editor"

# --- Site editor ---

# Theme the demo template part is filed under when full-site-editing-demo is on
SITE_EDITOR_DEMO_THEME = os.environ.get("SITE_EDITOR_DEMO_THEME", "siteeditor-demo")

# --- Browser suite ---

E2E_HEADLESS = _env_bool("E2E_HEADLESS", True)

# Bounded waits used by the entity save panel observer (milliseconds)
E2E_POLLING = {
    "interval_ms": _env_int("E2E_POLL_INTERVAL_MS", 25),
    "panel_timeout_ms": _env_int("E2E_PANEL_TIMEOUT_MS", 100),
    "entity_timeout_ms": _env_int("E2E_ENTITY_TIMEOUT_MS", 500),
    "navigation_timeout_ms": _env_int("E2E_NAVIGATION_TIMEOUT_MS", 3000),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "editor": {"level": os.environ.get("EDITOR_LOG_LEVEL", "INFO")},
        "siteconfig": {"level": os.environ.get("EDITOR_LOG_LEVEL", "INFO")},
        "e2e_tests": {"level": os.environ.get("E2E_LOG_LEVEL", "INFO")},
    },
}
