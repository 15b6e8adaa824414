"""
URL configuration for the brandvoice backend.
"""

from django.contrib import admin
from django.urls import include, path

from brandvoice.core.api import views as core_views
from brandvoice.users import urls as users_urls

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", core_views.healthcheck, name="healthcheck"),
    path("api/auth/", include((users_urls.auth_urlpatterns, "auth"))),
    path("api/", include("brandvoice.core.api.urls", namespace="core_api")),
]
