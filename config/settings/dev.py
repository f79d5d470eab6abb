"""Development settings for SpotBook project.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and logging
service activity at debug level. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Plain static files storage so runserver works without collectstatic
STORAGES = {
    **STORAGES,  # noqa: F405
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

LOGGING['loggers']['apps']['level'] = get_env('DJANGO_LOG_LEVEL', 'DEBUG')  # noqa: F405
