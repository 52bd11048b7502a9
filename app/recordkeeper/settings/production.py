from .base import *

# ensure DEBUG is False in Production
DEBUG = False

########################################################################################################################
# Overwrite production only settings here
########################################################################################################################
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
    "rest_framework.renderers.JSONRenderer",
]
