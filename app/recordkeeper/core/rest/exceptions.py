from rest_framework import exceptions, views

from recordkeeper.guard.exceptions import DeletionForbidden

__all__ = [
    "error_handler",
]


def error_handler(exc, context):
    # REST framework replaces the message of django's PermissionDenied by a generic one,
    # so rejected deletions are converted beforehand.
    if isinstance(exc, DeletionForbidden):
        exc = exceptions.PermissionDenied(
            detail=str(exc),
            code="deletion_forbidden",
        )

    # Call REST framework's default exception handler first,
    # to get the standard error response.
    response = views.exception_handler(exc, context)

    # Now add the status fields to the response.
    if response is not None:
        response.data["success"] = False
        response.data["status_code"] = getattr(exc, "status_code", None) or response.status_code

    return response
