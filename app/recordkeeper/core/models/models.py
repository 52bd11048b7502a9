from django.db import models, router
from django.utils.translation import gettext_lazy as _

from django_userforeignkey.models.fields import UserForeignKey

from .managers import BaseManager

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "ByUserMixin",
]


class BaseModel(models.Model):
    objects = BaseManager()

    class Meta:
        abstract = True

    def is_deletable(self):
        if self.pk and hasattr(self.__class__._default_manager, "deletable"):
            return self.__class__._default_manager.deletable().filter(pk=self.pk).exists()
        return True

    def raw_delete(self, using=None):
        """
        Removes the row of this element with a single DELETE statement.

        Unlike `delete()` no collector is involved: neither `pre_delete` nor `post_delete` are sent and related
        elements are not cascaded. Returns the number of deleted rows.
        """
        if self.pk is None:
            raise ValueError(
                _("{model} object can't be deleted because its {field} attribute is set to None.").format(
                    model=self._meta.object_name,
                    field=self._meta.pk.attname,
                ),
            )

        using = using or router.db_for_write(self.__class__, instance=self)

        return self.__class__._base_manager.using(using).filter(pk=self.pk)._raw_delete(using=using)

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        """
        Uses `str_fields` and `str_delimiter` from the meta model to build a string representation.
        Example usage:
        ```python
        class MyModel(BaseModel):
            a = IntegerField()
            b = TextField()
            c = BooleanField()

            class Meta:
                str_fields = ("a", "c",)
        ```
        """
        str_field_names = getattr(self.__class__._meta, "str_fields", None)
        if str_field_names:
            field_values = (getattr(self, name, None) for name in str_field_names)
            data = (str(value) for value in field_values if value)
            delimiter = getattr(self._meta, "str_delimiter", " | ")
            return delimiter.join(data)
        else:
            return str(self.pk)


class TimestampMixin(models.Model):
    creation_date = models.DateTimeField(
        verbose_name=_("Creation date"),
        blank=False,
        null=False,
        auto_now_add=True,
    )

    last_modification_date = models.DateTimeField(
        verbose_name=_("Last modification date"),
        blank=False,
        null=False,
        auto_now=True,
    )

    class Meta:
        abstract = True


class ByUserMixin(models.Model):
    created_by = UserForeignKey(
        verbose_name=_("User who created this element"),
        auto_user_add=True,  # sets the current user when the element is created
        null=True,
        related_name="%(class)s_created",
    )

    last_modified_by = UserForeignKey(
        verbose_name=_("User who last modified this element"),
        auto_user=True,  # sets the current user everytime the element is saved
        null=True,
        related_name="%(class)s_modified",
    )

    class Meta:
        abstract = True
