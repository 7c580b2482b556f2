import os
from pathlib import Path

# ======================
# PATHS
# ======================

BASE_DIR = Path(__file__).resolve().parent

# ======================
# SECURITY
# ======================

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-secret-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = ["*"]

# ======================
# APPS
# ======================

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "graphstats",
]

# ======================
# MIDDLEWARE
# ======================

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

# ======================
# URLS
# ======================

ROOT_URLCONF = "graphstats.urls"

# ======================
# TEMPLATES
# ======================

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

# ======================
# DATABASE
# ======================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ======================
# I18N
# ======================

LANGUAGE_CODE = "pl"
TIME_ZONE = "Europe/Warsaw"
USE_I18N = True
USE_TZ = True

# ======================
# STATIC
# ======================

STATIC_URL = "/static/"

# ======================
# LOGGING
# ======================

LOG_LEVEL = os.environ.get("GRAPHSTATS_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        # stderr, żeby nie mieszać logów z raportem na stdout
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "graphstats": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

# ======================
# GRAPHSTATS
# ======================

GRAPHSTATS_INPUT_PATH = os.environ.get("GRAPHSTATS_INPUT_PATH", "soc-Epinions1.txt")
GRAPHSTATS_WORKERS = int(os.environ.get("GRAPHSTATS_WORKERS", "1"))
GRAPHSTATS_MAX_WORKERS = int(os.environ.get("GRAPHSTATS_MAX_WORKERS", str(os.cpu_count() or 1)))

# api/analyze czyta pliki wyłącznie z tego katalogu
GRAPHSTATS_DATA_DIR = Path(os.environ.get("GRAPHSTATS_DATA_DIR", BASE_DIR / "data"))

# ======================
# DEFAULTS
# ======================

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
