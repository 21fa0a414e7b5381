from django.urls import re_path

from . import views

app_name = "core"

UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

urlpatterns = [
    # Authentication
    re_path(r"^auth/login/?$", views.LoginView.as_view(), name="login"),
    re_path(r"^auth/logout/?$", views.LogoutView.as_view(), name="logout"),
    re_path(r"^auth/me/?$", views.MeView.as_view(), name="me"),
    # User management (owner only)
    re_path(r"^users/?$", views.user_list, name="user_list"),
    re_path(r"^users/invite/?$", views.user_invite, name="user_invite"),
    re_path(
        rf"^users/(?P<user_id>{UUID})/role/?$",
        views.user_change_role,
        name="user_change_role",
    ),
]
