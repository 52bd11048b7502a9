import os
import sys

from django.utils.translation import gettext_lazy as _

import environ

########################################################################################################################
# Django Settings
# Please note that those settings can and should be overwritten by other files in this directory, e.g.
# - development.py
# - production.py
# - test.py
########################################################################################################################

# Load .env file

project_root = environ.Path(__file__) - 4  # four folders back

# load env file name
env_file_name = os.environ.get("ENV_FILE", ".env.development")

# load django env from django-environ
env = environ.Env(
    # set casting, default value
    DEBUG=(bool, False),
)
environ.Env.read_env(env_file=project_root(env_file_name))

# Build paths inside the project like this: os.path.join(BASE_DIR, ...)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG", default=False)  # False if not in os.environ

# Allowed Hosts
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])

# Django Secret Key
SECRET_KEY = env("SECRET_KEY")  # Raises ImproperlyConfigured exception if SECRET_KEY not in os.environ

# Database
# See https://django-environ.readthedocs.io/en/latest/#supported-types (e.g., postgres://)
DATABASES = {
    "default": env.db(),  # Raises ImproperlyConfigured exception if DATABASE_URL not in os.environ
}

# Application definition
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Django REST framework
    "django_filters",
    "rest_framework",
    # Django UserForeignKey
    "django_userforeignkey",
    # OpenAPI
    "drf_spectacular",
    # App
    "recordkeeper.core",
    "recordkeeper.guard",
    "recordkeeper.records",
]

MIDDLEWARE = [
    # Django
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.locale.LocaleMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Django UserForeignKey
    "django_userforeignkey.middleware.UserForeignKeyMiddleware",
]

ROOT_URLCONF = "recordkeeper.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "recordkeeper.wsgi.application"


# Password validation
# https://docs.djangoproject.com/en/5.0/topics/auth/passwords/#password-validation

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

# Internationalization
# https://docs.djangoproject.com/en/5.0/topics/i18n/
LANGUAGE_CODE = "en"
LANGUAGES = [
    ("en", _("English")),
]

LOCALE_PATHS = (os.path.join(BASE_DIR, "locale/"),)

TIME_ZONE = "Europe/Vienna"

USE_I18N = True

USE_TZ = True

# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/5.0/howto/static-files/

# Static Root: by default this is in the public directory in a sub-directory called static
STATIC_ROOT = project_root(
    env("STATIC_ROOT", default="./data/public/static"),
)
STATIC_URL = env("STATIC_URL", default="/static/")


# Logging
# https://docs.djangoproject.com/en/5.0/topics/logging/

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(message)s"},
        "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: '%(funcName)s' in '%(pathname)s' line '%(lineno)d': %(message)s",
        },
    },
    "filters": {},
    "handlers": {},
    "loggers": {
        "": {
            "handlers": [
                "default",
            ],
            "level": "INFO",
            "propagate": True,
        },
        "django.request": {
            "handlers": [
                "default",
            ],
            "level": "INFO",
            "propagate": False,
        },
        # rejected and forced deletions
        "recordkeeper.guard": {
            "handlers": [
                "default",
            ],
            "level": "DEBUG",
            "propagate": False,
        },
    },
}


if not env("LOG_TO_CONSOLE", default=False):
    # log everything into an application.log file with a rotating file handler
    LOGGING["handlers"]["default"] = {
        "level": "DEBUG",
        # logs are stored in projects root directory by default
        "filename": env("LOG_FILE", default=project_root(os.path.join("logs", "application.log"))),
        # rotate logs
        "class": "logging.handlers.RotatingFileHandler",
        "maxBytes": 1024 * 1024 * 5,  # 5 MB
        "backupCount": 50,
        "formatter": "verbose",
        "filters": [],
    }
else:
    # log everything to console (e.g., for cloud native deployments)
    LOGGING["handlers"]["default"] = {
        "class": "logging.StreamHandler",
        "formatter": "standard",
    }


# REST configuration
# https://www.django-rest-framework.org/api-guide/settings/

REST_FRAMEWORK = {
    "PAGE_SIZE": sys.maxsize,
    "MAX_PAGE_SIZE": sys.maxsize,
    "EXCEPTION_HANDLER": "recordkeeper.core.rest.exceptions.error_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.LimitOffsetPagination",
}


SPECTACULAR_SETTINGS = {
    "TITLE": "Recordkeeper",
    "DESCRIPTION": "Documentation of Recordkeeper",
    "VERSION": "1.0.0",
    "OAS_VERSION": "3.1.0",
    "COMPONENT_SPLIT_REQUEST": True,
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Deletion guard
# Whether undeletable elements may be removed via `force_delete()` or the `force_delete` management command
DELETION_GUARD_ALLOW_FORCE_DELETE = env.bool("DELETION_GUARD_ALLOW_FORCE_DELETE", default=False)
