from django.http import JsonResponse
from django.urls import include, path

urlpatterns = [
    path("health/", lambda r: JsonResponse({"ok": True}, status=200), name="health"),
    path("", include("core.urls")),
    path("", include("enquiries.urls")),
]
