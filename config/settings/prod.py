"""Production settings.

Extends the base settings with production specific configuration. The
database connection and the secret key must be provided via environment
variables; startup fails with ImproperlyConfigured when one is missing.
"""

from .base import *  # noqa: F401,F403
from .base import get_env

# Never run with debug enabled in production
DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = get_env('DJANGO_ALLOWED_HOSTS', required=True).split(',')

DATABASES['default'].update(  # noqa: F405
    {
        'HOST': get_env('DB_HOST', 'MYSQLHOST', 'MYSQL_HOST', required=True),
        'USER': get_env('DB_USER', 'MYSQLUSER', 'MYSQL_USER', required=True),
        'PASSWORD': get_env('DB_PASS', 'DB_PASSWORD', 'MYSQLPASSWORD', 'MYSQL_PASSWORD', required=True),
        'NAME': get_env('DB_NAME', 'MYSQLDATABASE', 'MYSQL_DATABASE', required=True),
    }
)

# Configure secure proxies and cookies
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
