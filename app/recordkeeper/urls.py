"""recordkeeper URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.0/topics/http/urls/
"""

from django.conf import settings
from django.contrib import admin
from django.urls import include, path

from drf_spectacular.views import SpectacularAPIView

from recordkeeper.core.utils.routers import get_api_router

__all__ = [
    "router",
    "urlpatterns",
]

router = get_api_router()


urlpatterns = [
    # Admin panel
    path("admin/", admin.site.urls),
    # Include apps
    path("", include("recordkeeper.records.urls")),
    # API
    path("api/v1/", include(router.urls)),
    # OpenAPI 3
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
]

# serve debug toolbar (only if installed)
if "debug_toolbar" in settings.INSTALLED_APPS:
    urlpatterns += [
        path("__debug__/", include("debug_toolbar.urls")),
    ]
