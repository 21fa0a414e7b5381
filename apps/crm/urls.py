"""
URL configuration for the customers API.
"""

from django.urls import re_path

from . import views

app_name = "crm"

UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

urlpatterns = [
    re_path(r"^customers/?$", views.customer_list, name="customer_list"),
    re_path(rf"^customers/(?P<customer_id>{UUID})/?$", views.customer_detail, name="customer_detail"),
]
