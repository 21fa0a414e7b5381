"""
URL configuration for the POS back office.
"""

from django.contrib import admin
from django.urls import include, path

from apps.core import views as core_views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health", core_views.health_check, name="health_check"),
    path("api/", include("apps.core.urls")),
    path("api/", include("apps.crm.urls")),
    path("api/", include("apps.inventory.urls")),
    path("api/", include("apps.documents.urls")),
    path("", include("django_prometheus.urls")),  # Prometheus metrics endpoint at /metrics
]

handler404 = "apps.core.views.api_not_found"
handler500 = "apps.core.views.api_server_error"
