"""Test settings for SpotBook project.

Runs against a throwaway file-backed SQLite database built from the
shipped migrations, so that threads in concurrency tests get their own
connections to the same data. Uses a fast password hasher and quiet
logging.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key-not-for-production-use-0123456789'

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'OPTIONS': {'transaction_mode': 'IMMEDIATE'},
        'TEST': {'NAME': BASE_DIR / 'test-db.sqlite3'},  # noqa: F405
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    **STORAGES,  # noqa: F405
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'WARNING'  # noqa: F405
