"""
JWT authentication carried in an HTTP-only cookie.

The login view issues a simplejwt access token and stores it in the
``AUTH_COOKIE`` cookie; every API request is authenticated from that cookie,
falling back to a standard ``Authorization: Bearer`` header.
"""

from django.conf import settings

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.tokens import AccessToken


class CookieJWTAuthentication(JWTAuthentication):
    """Authenticate requests from the session token cookie."""

    def authenticate(self, request):
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE["NAME"])
        if not raw_token:
            return super().authenticate(request)

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token


def issue_token(user):
    """Create a signed access token with the claims the frontend relies on."""
    token = AccessToken.for_user(user)
    token["username"] = user.username
    token["role"] = user.role
    return str(token)


def set_auth_cookie(response, token):
    cookie = settings.AUTH_COOKIE
    response.set_cookie(
        cookie["NAME"],
        token,
        max_age=cookie["MAX_AGE"],
        httponly=cookie["HTTPONLY"],
        secure=cookie["SECURE"],
        samesite=cookie["SAMESITE"],
    )
    return response


def clear_auth_cookie(response):
    cookie = settings.AUTH_COOKIE
    response.delete_cookie(cookie["NAME"], samesite=cookie["SAMESITE"])
    return response
