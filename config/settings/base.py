"""
Django base settings for the console client project.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'console-client-insecure-key')

DEBUG = False

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'apps.core',
    'apps.accounts',
    'apps.catalog',
    'apps.customers',
    'apps.promotions',
    'apps.reviews',
    'apps.returns',
    'apps.delivery',
    'apps.notifications',
    'apps.vendors',
    'apps.orders',
]

ROOT_URLCONF = 'config.urls'

# The client keeps no relational state of its own
DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Persisted key-value storage (tokens, auth snapshots, store snapshots)
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'console-client',
    }
}

# REST backend
CONSOLE_API = {
    'BASE_URL': os.environ.get('CONSOLE_API_BASE_URL', 'http://localhost:5000/api'),
    # None keeps the requests default (no timeout)
    'TIMEOUT': None,
}

# Role descriptors: storage keys and the area each role owns.
# Login routes are resolved from the URLconf namespace of the role.
CONSOLE_ROLES = {
    'admin': {
        'path_prefix': '/admin',
        'token_key': 'adminToken',
        'refresh_token_key': 'admin-refresh-token',
        'auth_storage_key': 'admin-auth-storage',
        'auth_pages': ['login'],
    },
    'vendor': {
        'path_prefix': '/vendor',
        'token_key': 'vendor-token',
        'refresh_token_key': 'vendor-refresh-token',
        'auth_storage_key': 'vendor-auth-storage',
        'auth_pages': ['login', 'register', 'verification', 'forgot-password', 'reset-password'],
    },
    'delivery': {
        'path_prefix': '/delivery',
        'token_key': 'delivery-token',
        'refresh_token_key': 'delivery-refresh-token',
        'auth_storage_key': 'delivery-auth-storage',
        'auth_pages': ['login', 'register', 'forgot-password', 'reset-password'],
    },
    'customer': {
        'path_prefix': '',
        'token_key': 'token',
        'refresh_token_key': 'refresh-token',
        'auth_storage_key': 'auth-storage',
        'auth_pages': ['login', 'register', 'verification'],
    },
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('CONSOLE_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
