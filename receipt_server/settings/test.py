"""
Test settings for receipt_server project.
"""

from .base import *

DEBUG = False
ALLOWED_HOSTS = ['*']

SECRET_KEY = 'django-insecure-test-key'

RECEIPTS_STORE_BACKEND = 'apps.receipts.storage.InMemoryScoreStore'
RECEIPTS_CACHE_ALIAS = 'default'

# Cache configuration for testing
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'receipt_server_test',
    }
}

# Disable logging during tests
LOGGING_CONFIG = None
