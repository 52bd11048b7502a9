import logging

from django.test import RequestFactory

from django_userforeignkey.request import set_current_request

__all__ = [
    "set_request_for_user",
]


logger = logging.getLogger(__name__)


def set_request_for_user(user):
    request = RequestFactory().request(**{})
    setattr(request, "user", user)
    set_current_request(request)

    # Check if the user has been set correctly
    request_user = getattr(request, "user")
    if request_user == user:
        logger.debug(f"User for request has been set to: {getattr(request, 'user')}")
    else:
        raise ValueError("Could not set user for request")

    return request
