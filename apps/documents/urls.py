"""
URL configuration for the documents API.
"""

from django.urls import re_path

from . import views

app_name = "documents"

UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

urlpatterns = [
    re_path(r"^documents/?$", views.DocumentListView.as_view(), name="document_list"),
    # Must precede the detail route
    re_path(r"^documents/stats/summary/?$", views.document_stats, name="document_stats"),
    re_path(
        rf"^documents/(?P<document_id>{UUID})/?$",
        views.DocumentDetailView.as_view(),
        name="document_detail",
    ),
    re_path(
        rf"^documents/(?P<document_id>{UUID})/convert/?$",
        views.document_convert,
        name="document_convert",
    ),
]
