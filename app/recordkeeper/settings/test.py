import os

# defaults for running the test suite without an env file
os.environ.setdefault("SECRET_KEY", "recordkeeper-test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("LOG_TO_CONSOLE", "True")

from .base import *  # noqa: E402

DEBUG = False

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

DELETION_GUARD_ALLOW_FORCE_DELETE = False

# caplog captures records on the root logger
LOGGING["loggers"]["recordkeeper.guard"]["propagate"] = True
