from recordkeeper.core.models import BaseQuerySet
from recordkeeper.guard.exceptions import forbid_deletion

__all__ = [
    "UndeletableQuerySet",
]


class UndeletableQuerySet(BaseQuerySet):
    """
    Query set of a model whose elements must never be removed.

    Both bulk deletion entry points are overridden: `delete()` (collects the elements and sends signals) and
    `_raw_delete()` (a single DELETE statement, used by the collector for fast deletes). Neither of them evaluates the
    query set before raising.
    """

    def delete(self):
        raise forbid_deletion(self.model, "bulk_delete")

    delete.alters_data = True
    delete.queryset_only = True

    def _raw_delete(self, using):
        raise forbid_deletion(self.model, "raw_bulk_delete")

    _raw_delete.alters_data = True

    def deletable(self, *args, **kwargs):
        return self.none()
