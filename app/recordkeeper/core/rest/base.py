from rest_framework import authentication, filters, pagination, permissions, serializers
from rest_framework.viewsets import GenericViewSet

import django_filters

__all__ = [
    "BaseModelViewSet",
    "BaseModelSerializer",
]


class BaseModelViewSet(GenericViewSet):
    filter_backends = (
        django_filters.rest_framework.DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    )
    authentication_classes = (authentication.SessionAuthentication,)
    permission_classes = (permissions.IsAuthenticated,)
    pagination_class = pagination.LimitOffsetPagination


class BaseModelSerializer(serializers.ModelSerializer):
    is_deletable = serializers.BooleanField(
        read_only=True,
    )
