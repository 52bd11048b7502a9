from recordkeeper.core.utils.routers import get_api_router

from .rest.views import *

__all__ = [
    "router",
    "urlpatterns",
]

router = get_api_router()

router.register(r"record-categories", CategoryViewSet, basename="record-category")

router.register(r"records", RecordViewSet, basename="record")

urlpatterns = []
