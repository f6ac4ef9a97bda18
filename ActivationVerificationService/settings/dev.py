"""
Development settings for ActivationVerificationService.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-dev-only-key")

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Override with environment variable DB_ENGINE=sqlite for SQLite
if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# Local development registry
LICENSE_REGISTRY["BASE_URL"] = LICENSE_REGISTRY["BASE_URL"] or (  # noqa: F405
    "http://localhost:8080/wp-json/lmfwc/v2"
)

# Opt-in: open access to the verify endpoint while developing locally
if os.environ.get("VERIFY_ALLOW_ANY") == "true":
    ACTIVATION_VERIFY_PERMISSION_CLASSES = ["rest_framework.permissions.AllowAny"]

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
