"""Base settings for all environments.

This configuration file defines the common settings used in development,
production and tests. It follows Django's standard configuration structure
and integrates Django Rest Framework, django-filter, CORS headers and
structlog. Environment-specific overrides live in `dev.py`, `prod.py` and
`test.py`.
"""

import os
from pathlib import Path

import structlog
from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(BASE_DIR / '.env')


def get_env(*names: str, default=None, required: bool = False):
    """Value of the first environment variable set among ``names``."""
    for name in names:
        value = os.environ.get(name)
        if value not in (None, ''):
            return value
    if required and default in (None, ''):
        raise ImproperlyConfigured(
            f"Missing required environment variable: {' or '.join(names)}"
        )
    return default


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = get_env('DJANGO_SECRET_KEY', default='replace-me-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

ALLOWED_HOSTS: list[str] = get_env('DJANGO_ALLOWED_HOSTS', default='*').split(',')

# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    # Third‑party apps
    'rest_framework',
    'django_filters',
    'corsheaders',
    'drf_spectacular',
    # Domain apps
    'apps.rooms',
    'apps.reservations',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# Database
# https://docs.djangoproject.com/en/5.1/ref/settings/#databases
#
# Variable names used by common hosting platforms are accepted as aliases.
# Every store call is bounded: connecting and running a statement both time
# out, and the booking engine reports the failure as Unavailable.

DB_ENGINE = get_env('DB_ENGINE', default='django.db.backends.sqlite3')
DB_CONNECT_TIMEOUT = int(get_env('DB_CONNECT_TIMEOUT', default='5'))
DB_STATEMENT_TIMEOUT_MS = int(get_env('DB_STATEMENT_TIMEOUT_MS', default='5000'))


def database_options(engine: str) -> dict:
    """Timeout and isolation options for the configured backend."""
    if 'postgresql' in engine:
        return {
            'connect_timeout': DB_CONNECT_TIMEOUT,
            'options': (
                f'-c statement_timeout={DB_STATEMENT_TIMEOUT_MS} '
                f'-c lock_timeout={DB_STATEMENT_TIMEOUT_MS}'
            ),
        }
    if 'mysql' in engine:
        read_timeout = max(1, DB_STATEMENT_TIMEOUT_MS // 1000)
        return {
            'connect_timeout': DB_CONNECT_TIMEOUT,
            'read_timeout': read_timeout,
            'write_timeout': read_timeout,
            'isolation_level': 'read committed',
            'init_command': f'SET SESSION innodb_lock_wait_timeout={read_timeout}',
        }
    if 'sqlite' in engine:
        # Take the write lock at BEGIN so check-then-insert cannot interleave
        return {
            'timeout': DB_STATEMENT_TIMEOUT_MS / 1000,
            'transaction_mode': 'IMMEDIATE',
        }
    return {}


DATABASES = {
    'default': {
        'ENGINE': DB_ENGINE,
        'NAME': get_env('DB_NAME', 'MYSQLDATABASE', 'MYSQL_DATABASE', default=BASE_DIR / 'db.sqlite3'),
        'USER': get_env('DB_USER', 'MYSQLUSER', 'MYSQL_USER', default=''),
        'PASSWORD': get_env('DB_PASS', 'DB_PASSWORD', 'MYSQLPASSWORD', 'MYSQL_PASSWORD', default=''),
        'HOST': get_env('DB_HOST', 'MYSQLHOST', 'MYSQL_HOST', default=''),
        'PORT': get_env('DB_PORT', 'MYSQLPORT', 'MYSQL_PORT', default='3306' if 'mysql' in DB_ENGINE else ''),
        'CONN_MAX_AGE': int(get_env('DB_CONN_MAX_AGE', default='60')),
        'CONN_HEALTH_CHECKS': True,
        'OPTIONS': database_options(DB_ENGINE),
    }
}

# Password validation
# https://docs.djangoproject.com/en/5.1/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

# Internationalization
# https://docs.djangoproject.com/en/5.1/topics/i18n/

LANGUAGE_CODE = 'en-us'

# Reservation dates and times are interpreted in this single zone
TIME_ZONE = get_env('TIME_ZONE', default='Asia/Seoul')

USE_I18N = True

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Static files (CSS, JavaScript, Images)

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Django Rest Framework
# No authentication model: the API is public.
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'UNAUTHENTICATED_USER': None,
}

# CORS settings
CORS_ALLOWED_ORIGINS = get_env(
    'CORS_ALLOWED_ORIGINS',
    default='http://localhost:3000,http://localhost:8000,http://127.0.0.1:8000',
).split(',')

# DRF Spectacular (API docs)
SPECTACULAR_SETTINGS = {
    'TITLE': 'Room Reservation API',
    'DESCRIPTION': 'Reserve rooms by date and time without double-booking',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
}

# Logging
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

LOG_LEVEL = get_env('LOG_LEVEL', default='INFO')

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "structlog.stdlib.ProcessorFormatter",
            "processors": [
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            "foreign_pre_chain": [
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
            ],
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "level": LOG_LEVEL,
        }
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "apps": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "shared": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
