"""Settings used by the test suite (pytest-django)."""

import os
import tempfile

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'OPTIONS': database_options('django.db.backends.sqlite3'),  # noqa: F405
        # File backed so threads in TransactionTestCase share one database
        'TEST': {
            'NAME': os.path.join(tempfile.gettempdir(), 'room_reservation_test.sqlite3'),
        },
    }
}

# Point TEST_DB_ENGINE=django.db.backends.postgresql (plus DB_* variables) at a
# real server to run the concurrency tests against row locking.
if get_env('TEST_DB_ENGINE'):  # noqa: F405
    _engine = get_env('TEST_DB_ENGINE')  # noqa: F405
    DATABASES['default'] = {
        'ENGINE': _engine,
        'NAME': get_env('DB_NAME', 'MYSQLDATABASE', 'MYSQL_DATABASE', default='reservations'),  # noqa: F405
        'USER': get_env('DB_USER', 'MYSQLUSER', 'MYSQL_USER', default=''),  # noqa: F405
        'PASSWORD': get_env('DB_PASS', 'DB_PASSWORD', 'MYSQLPASSWORD', 'MYSQL_PASSWORD', default=''),  # noqa: F405
        'HOST': get_env('DB_HOST', 'MYSQLHOST', 'MYSQL_HOST', default='localhost'),  # noqa: F405
        'PORT': get_env('DB_PORT', 'MYSQLPORT', 'MYSQL_PORT', default=''),  # noqa: F405
        'OPTIONS': database_options(_engine),  # noqa: F405
    }

LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'CRITICAL'  # noqa: F405
