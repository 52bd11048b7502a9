import logging

from django.core.exceptions import PermissionDenied
from django.utils.translation import gettext_lazy as _

from django_userforeignkey.request import get_current_user

__all__ = [
    "DeletionForbidden",
    "forbid_deletion",
]

logger = logging.getLogger(__name__)


class DeletionForbidden(PermissionDenied):
    """
    Raised whenever an element of a deletion-guarded model is about to be removed from the database.
    """

    def __init__(self, model, operation, pk=None):
        self.model = model
        self.operation = operation
        self.pk = pk

        if pk is None:
            message = _("Elements of type {model} must not be deleted.").format(
                model=model._meta.verbose_name,
            )
        else:
            message = _("{model} {pk} must not be deleted.").format(
                model=str(model._meta.verbose_name).capitalize(),
                pk=pk,
            )

        super().__init__(message)

    def __reduce__(self):
        return self.__class__, (self.model, self.operation, self.pk)


def forbid_deletion(model, operation, pk=None):
    """
    Logs a rejected deletion and returns the exception the caller has to raise.

    :param model: model class of the guarded element(s)
    :param operation: name of the intercepted operation, e.g. "delete" or "bulk_delete"
    :param pk: primary key of the element, `None` for query set operations
    :return: DeletionForbidden
    """
    logger.warning(
        "Rejected %s of %s%s requested by %s",
        operation,
        model._meta.label,
        f" {pk}" if pk is not None else "",
        get_current_user(),
    )

    return DeletionForbidden(model, operation, pk=pk)
