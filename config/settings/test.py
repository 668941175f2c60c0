"""Test settings for the resource booking service.

Runs against a file-backed SQLite database, so threaded tests can open
several connections to it, and plain static storage so tests need neither
external services nor collected static files.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test_db.sqlite3',  # noqa: F405
        'OPTIONS': {'transaction_mode': 'IMMEDIATE', 'timeout': 20},
        'TEST': {'NAME': BASE_DIR / 'test_db.sqlite3'},  # noqa: F405
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

# Keep test output quiet
LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
for _logger in LOGGING['loggers'].values():  # noqa: F405
    _logger['level'] = 'CRITICAL'
