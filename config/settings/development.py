"""
Django development settings for the console client project.
"""
import os
from .base import *

DEBUG = True

ALLOWED_HOSTS = ['*']

# Redis-backed persisted storage so tokens survive between runs
CACHES = {
    'default': {
        'BACKEND': 'django_redis.cache.RedisCache',
        'LOCATION': os.environ.get('REDIS_URL', 'redis://localhost:6379/0'),
        'OPTIONS': {
            'CLIENT_CLASS': 'django_redis.client.DefaultClient',
        },
        'KEY_PREFIX': 'console_client',
    }
}

LOGGING['loggers']['apps']['level'] = 'DEBUG'
