"""
Serializers for authentication and user management.
"""

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from rest_framework import serializers

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public representation of a user account (never exposes the password hash)."""

    fullName = serializers.CharField(source="full_name", read_only=True)
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "fullName", "role", "createdAt"]
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(
        error_messages={
            "required": "Username and password are required.",
            "blank": "Username and password are required.",
        }
    )
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Username and password are required.",
            "blank": "Username and password are required.",
        },
    )


class UserInviteSerializer(serializers.Serializer):
    """
    Serializer for creating a user from the owner's user management screen.
    """

    username = serializers.CharField(
        max_length=150,
        error_messages={
            "required": "Username and password are required.",
            "blank": "Username and password are required.",
        },
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={
            "required": "Username and password are required.",
            "blank": "Username and password are required.",
        },
    )
    fullName = serializers.CharField(
        source="full_name", required=False, allow_blank=True, allow_null=True, max_length=200
    )
    role = serializers.ChoiceField(
        choices=User.ROLE_CHOICES,
        default=User.ADMIN,
        error_messages={"invalid_choice": "Invalid role."},
    )

    def validate(self, attrs):
        candidate = User(username=attrs["username"], full_name=attrs.get("full_name") or "")
        validate_password(attrs["password"], user=candidate)
        return attrs

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["username"],
            password=validated_data["password"],
            full_name=validated_data.get("full_name") or "",
            role=validated_data["role"],
        )


class RoleChangeSerializer(serializers.Serializer):
    role = serializers.ChoiceField(
        choices=User.ROLE_CHOICES,
        error_messages={
            "required": "Invalid role.",
            "invalid_choice": "Invalid role.",
            "null": "Invalid role.",
        },
    )
