from recordkeeper.core.models import BaseManager

from .querysets import *

__all__ = [
    "UndeletableManager",
]


class UndeletableManager(BaseManager.from_queryset(UndeletableQuerySet)):
    pass
