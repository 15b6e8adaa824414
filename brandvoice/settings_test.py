"""
Test settings for brandvoice.

Overrides the main settings to:
1. Skip loading .env file (no external secrets needed for tests)
2. Use SQLite in-memory database (fast, no network)
3. Use a fixed JWT secret so tests can mint tokens

Usage:
    pytest uses this automatically via pyproject.toml:
    [tool.pytest.ini_options]
    DJANGO_SETTINGS_MODULE = "brandvoice.settings_test"
"""

import os

# Prevent dotenv from loading external DATABASE_URL
os.environ["BRANDVOICE_TEST_MODE"] = "true"

# Import everything from base settings AFTER setting test mode
from brandvoice.settings import *  # noqa: F401, F403, E402

# =============================================================================
# TEST DATABASE CONFIGURATION
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# =============================================================================
# TEST-SPECIFIC SETTINGS
# =============================================================================

DEBUG = False

AUTH_DISABLED = False

AUTH_JWT_SECRET = "test-jwt-secret-with-enough-length-for-hs256"

AUTH_JWT_AUDIENCE = "authenticated"

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
