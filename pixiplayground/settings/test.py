# pixiplayground/settings/test.py
from .base import *  # noqa: F401,F403

DEBUG = True

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test_playground.sqlite3",
    }
}

CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"
CELERY_TASK_ALWAYS_EAGER = True

CLOUDFLARE_ZONE_ID = ""
CLOUDFLARE_API_TOKEN = ""

# Let pytest's caplog see application log records.
for _logger in ("playgrounds", "api"):
    LOGGING["loggers"][_logger]["propagate"] = True
