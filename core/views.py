import logging

from rest_framework import exceptions, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LogInSerializer

logger = logging.getLogger(__name__)


class LogInView(APIView):
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = LogInSerializer(data=request.data)

        try:
            serializer.is_valid(raise_exception=True)
        except exceptions.AuthenticationFailed as e:
            logger.warning(
                f"Login error: {e.detail}",
                extra={"username": request.data.get("username")},
            )
            return Response(
                {"message": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        logger.info(f"Admin '{serializer.validated_data['username']}' logged in.")
        return Response(serializer.validated_data, status=status.HTTP_200_OK)


class ProfileView(APIView):
    """Echoes the identity resolved from the bearer token."""

    def get(self, request, *args, **kwargs):
        return Response(
            {"username": request.user.username or str(request.user.id), "is_staff": True}
        )
