# catalog/urls.py
"""
STOREFRONT URLS

Mounted at the site root in shopfront/urls.py.
"""

from __future__ import annotations

from django.urls import path

from catalog.views.storefront import AddToCartView, HomeView, ProductDetailView

app_name = "catalog"

urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("product/<str:slug>/", ProductDetailView.as_view(), name="product-detail"),
    path("product/<str:slug>/add-to-cart/", AddToCartView.as_view(), name="add-to-cart"),
]
