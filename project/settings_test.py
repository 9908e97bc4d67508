# pylint: skip-file
# flake8: noqa
"""
Django settings for running tests.

This settings module overrides certain production settings so that tests run
quickly and deterministically. In particular, it uses an in-memory database,
a fixed secret key and disables API throttling so that repeated requests in
a test session are never rejected.

Usage:
    Set DJANGO_SETTINGS_MODULE=project.settings_test when running tests,
    or configure pytest accordingly.

Note:
    Linting is disabled for this file to avoid warnings about star imports
    or test-specific overrides.
"""
import os

os.environ.setdefault('DJANGO_SECRET_KEY', 'test-secret-key')

from .settings import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

INDEXABLE = False

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_CLASSES': [],
}

LOGGING = {
    **LOGGING,
    'root': {'handlers': ['console'], 'level': 'WARNING'},
}
