from recordkeeper.core.rest.base import BaseModelSerializer
from recordkeeper.records.models import *

__all__ = [
    "CategorySerializer",
    "AttachmentSerializer",
    "RecordSerializer",
]


class CategorySerializer(BaseModelSerializer):
    class Meta:
        model = Category
        fields = [
            "pk",
            "name",
            "is_deletable",
        ]


class AttachmentSerializer(BaseModelSerializer):
    class Meta:
        model = Attachment
        fields = [
            "pk",
            "name",
        ]


class RecordSerializer(BaseModelSerializer):
    attachments = AttachmentSerializer(
        many=True,
        read_only=True,
    )

    class Meta:
        model = Record
        fields = [
            "pk",
            "title",
            "content",
            "category",
            "attachments",
            "is_deletable",
        ]
