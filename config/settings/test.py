"""
Test settings for the ticket printing backend.

SQLite in memory, eager Celery and a throwaway media directory.
"""

import os
import tempfile

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')

from .base import *  # noqa

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

MEDIA_ROOT = tempfile.mkdtemp(prefix='ticketing-test-media-')

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

TICKETING = {
    **TICKETING,
    'QR_WORKERS': 1,
    'TEMPLATE_PATH': None,
    'INCLUDE_EXCEL_EXPORT': False,
}

LOGGING['loggers']['apps.ticketing']['level'] = 'WARNING'
