# console/api/urls.py

from django.urls import path

from console.api.views import (
    ProductDetailView,
    ProductListCreateView,
    UserDetailView,
    UserListView,
)

app_name = "console-api"

urlpatterns = [
    # ---------------- PRODUCTS ----------------
    path("products/", ProductListCreateView.as_view(), name="product-list"),
    path("products/<str:pk>/", ProductDetailView.as_view(), name="product-detail"),
    # ---------------- USERS ----------------
    path("users/", UserListView.as_view(), name="user-list"),
    path("users/<str:pk>/", UserDetailView.as_view(), name="user-detail"),
]
