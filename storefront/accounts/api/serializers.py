# accounts/api/serializers.py

from rest_framework import serializers

from accounts.forms import MIN_PASSWORD_LENGTH


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


# ---------------- REGISTER ----------------
class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})
    password_confirm = serializers.CharField(
        write_only=True, style={"input_type": "password"}
    )

    def validate(self, attrs):
        if attrs["password"] != attrs["password_confirm"]:
            raise serializers.ValidationError(
                {"password_confirm": "Passwords do not match."}
            )
        if len(attrs["password"]) < MIN_PASSWORD_LENGTH:
            raise serializers.ValidationError(
                {
                    "password": (
                        f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
                    )
                }
            )
        return attrs


# ---------------- USER OUTPUT ----------------
class UserSerializer(serializers.Serializer):
    """
    Safe user representation for frontend consumption.
    """

    id = serializers.CharField()
    email = serializers.EmailField()
    firstname = serializers.CharField()
    lastname = serializers.CharField()
    role = serializers.CharField()
    avatar = serializers.CharField()
    verified = serializers.BooleanField()
    is_admin = serializers.BooleanField()


class LoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = UserSerializer()
