"""
URL configuration for Cat Collector.
"""
from django.contrib import admin
from django.urls import include, path

from apps.cats.views import health_check

urlpatterns = [
    path("health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/cats/", include("apps.cats.api.urls")),
    # allauth before the app catch-all: the first matching pattern wins
    path("accounts/", include("allauth.urls")),
    path("", include("apps.cats.urls")),
]
