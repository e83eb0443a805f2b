# accounts/api/urls.py

from django.urls import path

from accounts.api.views import LoginView, MeView, RegisterView

app_name = "accounts-api"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("me/", MeView.as_view(), name="me"),
]
