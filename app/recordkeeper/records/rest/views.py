from django.db import transaction

from rest_framework import mixins

from drf_spectacular.utils import OpenApiResponse, extend_schema

from recordkeeper.core.rest.base import BaseModelViewSet
from recordkeeper.records.models import *
from recordkeeper.records.rest.serializers import *

__all__ = [
    "CategoryViewSet",
    "RecordViewSet",
]


class CategoryViewSet(
    BaseModelViewSet,
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
):
    queryset = Category.objects.none()

    serializer_class = CategorySerializer

    search_fields = [
        "name",
    ]

    ordering_fields = [
        "name",
        "creation_date",
    ]

    @extend_schema(
        responses={
            204: None,
            403: OpenApiResponse(description="The category still holds records, which must not be deleted."),
        },
    )
    def destroy(self, request, *args, **kwargs):
        return super().destroy(request, *args, **kwargs)

    def perform_destroy(self, instance):
        # rejected cascades must only roll back to this savepoint
        with transaction.atomic():
            instance.delete()

    def get_queryset(self):
        """
        Gets the queryset for the view set
        :return:
        """
        return Category.objects.all()


class RecordViewSet(
    BaseModelViewSet,
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
):
    queryset = Record.objects.none()

    serializer_class = RecordSerializer

    filterset_fields = [
        "category",
    ]

    search_fields = [
        "title",
        "content",
    ]

    ordering_fields = [
        "title",
        "creation_date",
    ]

    @extend_schema(
        responses={
            403: OpenApiResponse(description="Records must not be deleted."),
        },
    )
    def destroy(self, request, *args, **kwargs):
        return super().destroy(request, *args, **kwargs)

    def get_queryset(self):
        """
        Gets the queryset for the view set
        :return:
        """
        return Record.objects.select_related(
            "category",
        ).prefetch_related(
            "attachments",
        )
