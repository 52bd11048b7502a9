from django.db import models
from django.utils.translation import gettext_lazy as _

from recordkeeper.core.models import BaseModel, ByUserMixin, TimestampMixin
from recordkeeper.guard.models import UndeletableMixin

__all__ = [
    "Category",
    "Record",
    "Attachment",
]


class Category(BaseModel, TimestampMixin):
    name = models.CharField(
        verbose_name=_("Name"),
        max_length=255,
        unique=True,
    )

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = [
            "name",
        ]
        str_fields = ("name",)


class Record(UndeletableMixin, BaseModel, TimestampMixin, ByUserMixin):
    title = models.CharField(
        verbose_name=_("Title"),
        max_length=255,
    )

    content = models.TextField(
        verbose_name=_("Content"),
        blank=True,
        default="",
    )

    category = models.ForeignKey(
        Category,
        verbose_name=_("Category"),
        blank=True,
        null=True,
        related_name="records",
        on_delete=models.CASCADE,
    )

    class Meta:
        verbose_name = _("Record")
        verbose_name_plural = _("Records")
        ordering = [
            "pk",
        ]
        base_manager_name = "objects"
        str_fields = ("title",)


class Attachment(BaseModel, TimestampMixin):
    record = models.ForeignKey(
        Record,
        verbose_name=_("Record"),
        related_name="attachments",
        on_delete=models.CASCADE,
    )

    name = models.CharField(
        verbose_name=_("Name"),
        max_length=255,
    )

    class Meta:
        verbose_name = _("Attachment")
        verbose_name_plural = _("Attachments")
        ordering = [
            "name",
        ]
        str_fields = ("name",)
