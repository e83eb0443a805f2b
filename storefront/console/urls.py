# console/urls.py
"""
ADMIN CONSOLE URLS

Base path (mounted in shopfront/urls.py):
    /<CONSOLE_PATH>   (default /console/)
"""

from __future__ import annotations

from django.urls import path
from django.views.generic import RedirectView

from console.views.dashboard import DashboardView
from console.views.products import (
    ProductCreateView,
    ProductDeleteView,
    ProductListView,
    ProductUpdateView,
)
from console.views.users import UserDeleteView, UserListView, UserUpdateView

app_name = "console"

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="console:dashboard"), name="index"),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),

    # Products
    path("products/", ProductListView.as_view(), name="product-list"),
    path("products/new/", ProductCreateView.as_view(), name="product-create"),
    path("products/<str:pk>/edit/", ProductUpdateView.as_view(), name="product-edit"),
    path("products/<str:pk>/delete/", ProductDeleteView.as_view(), name="product-delete"),

    # Users
    path("users/", UserListView.as_view(), name="user-list"),
    path("users/<str:pk>/edit/", UserUpdateView.as_view(), name="user-edit"),
    path("users/<str:pk>/delete/", UserDeleteView.as_view(), name="user-delete"),
]
