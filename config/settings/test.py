"""Test settings: in-memory database, local cache and fixed peer URLs."""

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'property-service-tests',
    }
}

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

AGENT_SERVICE_URL = 'http://agents.test'
CITY_SERVICE_URL = 'http://cities.test'
PROPERTY_TYPE_SERVICE_URL = 'http://property-types.test'
PEER_SERVICE_TIMEOUT = 1.0

PROPERTY_LIST_CACHE_ENABLED = False
