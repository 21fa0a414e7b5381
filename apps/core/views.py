"""
Core views: health check, authentication, and user management.
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.models import update_last_login
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import clear_auth_cookie, issue_token, set_auth_cookie
from .exceptions import Conflict, InvalidOperation
from .permissions import IsOwner
from .serializers import LoginSerializer, RoleChangeSerializer, UserInviteSerializer, UserSerializer

User = get_user_model()
logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def health_check(request):
    """
    Health check endpoint for Docker and load balancers.
    Returns 200 OK if the application is running.
    """
    return JsonResponse({"status": "ok", "timestamp": timezone.now().isoformat()})


def api_not_found(request, exception=None):
    return JsonResponse({"error": "The requested API endpoint was not found."}, status=404)


def api_server_error(request):
    return JsonResponse({"error": "Internal server error"}, status=500)


# Authentication Views


class LoginView(APIView):
    """
    Exchange a username and password for the session token cookie.

    Request body:
    {
        "username": "owner",
        "password": "..."
    }
    """

    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            username=serializer.validated_data["username"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Failed login attempt for %s", serializer.validated_data["username"])
            return Response(
                {"error": "Invalid username or password."},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        update_last_login(None, user)
        response = Response({"user": _user_summary(user)}, status=status.HTTP_200_OK)
        return set_auth_cookie(response, issue_token(user))


class LogoutView(APIView):
    """Clear the session token cookie."""

    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        response = Response({"message": "Logged out successfully."}, status=status.HTTP_200_OK)
        return clear_auth_cookie(response)


class MeView(APIView):
    """Return the account behind the current session token."""

    def get(self, request):
        return Response({"user": UserSerializer(request.user).data})


def _user_summary(user):
    data = UserSerializer(user).data
    data.pop("createdAt")
    return data


# User Management Views (owner only)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated, IsOwner])
def user_list(request):
    """List all back-office accounts, oldest first."""
    users = User.objects.order_by("date_joined")
    return Response({"users": UserSerializer(users, many=True).data})


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated, IsOwner])
def user_invite(request):
    """
    Create a new back-office account.

    Request body:
    {
        "username": "cashier",
        "password": "...",
        "fullName": "Front Counter" (optional),
        "role": "owner|admin" (optional, default: admin)
    }
    """
    serializer = UserInviteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    if User.objects.filter(username=serializer.validated_data["username"]).exists():
        raise Conflict("Username already exists.")

    user = serializer.save()
    logger.info("User %s created by %s", user.username, request.user.username)
    return Response({"user": UserSerializer(user).data}, status=status.HTTP_201_CREATED)


@api_view(["PATCH"])
@permission_classes([permissions.IsAuthenticated, IsOwner])
def user_change_role(request, user_id):
    """Change another user's role. Owners cannot change their own role."""
    if str(user_id).lower() == str(request.user.id):
        raise InvalidOperation("You cannot change your own role.")

    serializer = RoleChangeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        return Response({"error": "User not found."}, status=status.HTTP_404_NOT_FOUND)

    user.role = serializer.validated_data["role"]
    user.save(update_fields=["role"])
    logger.info("Role of %s changed to %s by %s", user.username, user.role, request.user.username)

    return Response({"user": _user_summary(user)})
