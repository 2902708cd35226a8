"""
Production settings for receipt_server project.
"""

from decouple import config, Csv
from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

SECRET_KEY = config('SECRET_KEY')
ALLOWED_HOSTS = config('ALLOWED_HOSTS', cast=Csv())

# Security settings
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# CORS settings for production
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = config('CORS_ALLOWED_ORIGINS', default='', cast=Csv())

# Shared cache for CacheScoreStore, e.g. redis://redis:6379/1
CACHE_LOCATION = config('CACHE_LOCATION', default='')
if CACHE_LOCATION:
    CACHES['default'] = {
        'BACKEND': config('CACHE_BACKEND', default='django.core.cache.backends.redis.RedisCache'),
        'LOCATION': CACHE_LOCATION,
        'KEY_PREFIX': 'receipt_server',
    }

# Structured logs on stdout
LOGGING['handlers']['console']['formatter'] = 'json'
LOGGING['loggers']['django']['level'] = 'WARNING'
