from django.db import models

from recordkeeper.guard.exceptions import forbid_deletion

from .managers import *

__all__ = [
    "UndeletableMixin",
]


class UndeletableMixin(models.Model):
    """
    Marks a model as undeletable.

    Has to be listed before `BaseModel` in the bases of the model. Concrete models should also set
    `base_manager_name = "objects"` in their meta class, otherwise `guard.W001` is reported.
    """

    objects = UndeletableManager()

    class Meta:
        abstract = True

    def delete(self, *args, **kwargs):
        raise forbid_deletion(self.__class__, "delete", pk=self.pk)

    delete.alters_data = True

    def raw_delete(self, *args, **kwargs):
        raise forbid_deletion(self.__class__, "raw_delete", pk=self.pk)

    raw_delete.alters_data = True
