from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """Grants access to requests carrying a valid admin bearer token."""

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_staff", False))
