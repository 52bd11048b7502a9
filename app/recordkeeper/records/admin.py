from django.contrib import admin

from recordkeeper.guard.admin import UndeletableModelAdminMixin
from recordkeeper.records.models import *

__all__ = [
    "CategoryAdmin",
    "RecordAdmin",
]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = [
        "name",
        "creation_date",
    ]

    search_fields = [
        "pk",
        "name",
    ]


class AttachmentTabularInline(admin.TabularInline):
    model = Attachment
    extra = 0


@admin.register(Record)
class RecordAdmin(UndeletableModelAdminMixin, admin.ModelAdmin):
    list_display = [
        "title",
        "category",
        "created_by",
        "last_modification_date",
    ]

    list_filter = [
        "category",
    ]

    search_fields = [
        "pk",
        "title",
        "content",
        "category__name",
    ]

    readonly_fields = [
        "created_by",
        "last_modified_by",
    ]

    inlines = [
        AttachmentTabularInline,
    ]
