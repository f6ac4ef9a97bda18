"""
Test settings for ActivationVerificationService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

SECRET_KEY = "test-secret-key"

# Use in-memory SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Use in-memory cache for tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Password hashers for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LICENSE_REGISTRY = {
    "BASE_URL": "https://registry.test/wp-json/lmfwc/v2",
    "API_KEY": "ck_test_key",
    "API_SECRET": "cs_test_secret",
    "TIMEOUT": 2.0,
}

VERIFICATION_CLIENT_API_KEYS = ["test-client-key"]

# Disable logging during tests
LOGGING_CONFIG = None
