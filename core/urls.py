from django.urls import path

from .views import LogInView, ProfileView

urlpatterns = [
    path("api/auth/login/", LogInView.as_view(), name="log_in"),
    path("api/auth/me/", ProfileView.as_view(), name="profile"),
]
