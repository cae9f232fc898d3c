from rest_framework import exceptions, serializers
from rest_framework_simplejwt.tokens import AccessToken

from .admin_account import authenticate_admin


class LogInSerializer(serializers.Serializer):
    username = serializers.CharField(
        error_messages={
            "required": "Please enter both username and password",
            "blank": "Please enter both username and password",
        }
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={
            "required": "Please enter both username and password",
            "blank": "Please enter both username and password",
        },
    )

    @classmethod
    def get_token(cls, username):
        token = AccessToken()
        token["user_id"] = username
        token["username"] = username
        token["is_staff"] = True
        return token

    def validate(self, data):
        username = authenticate_admin(data["username"], data["password"])
        if username is None:
            raise exceptions.AuthenticationFailed("Invalid credentials")
        return {
            "token": str(self.get_token(username)),
            "username": username,
        }
