# catalog/api/urls.py

from django.urls import path

from catalog.api.views import FeaturedProductsView, ProductDetailView

app_name = "catalog-api"

urlpatterns = [
    path("products/", FeaturedProductsView.as_view(), name="product-list"),
    path("products/<str:slug>/", ProductDetailView.as_view(), name="product-detail"),
]
