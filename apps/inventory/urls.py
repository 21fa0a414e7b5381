"""
URL configuration for the products API.
"""

from django.urls import re_path

from . import views

app_name = "inventory"

UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

urlpatterns = [
    re_path(r"^products/?$", views.product_list, name="product_list"),
    re_path(rf"^products/(?P<product_id>{UUID})/?$", views.product_detail, name="product_detail"),
]
