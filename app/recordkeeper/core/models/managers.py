from django.db import models

from .querysets import BaseQuerySet

__all__ = [
    "BaseManager",
]


class BaseManager(models.Manager.from_queryset(BaseQuerySet)):
    """Manager BaseManager

    This is the manager class all other managers should inherit from.
    """

    pass
