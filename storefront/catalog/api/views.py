# catalog/api/views.py
"""
PUBLIC CATALOG API

GET /api/catalog/products/?limit=<n>   newest products (featured grid)
GET /api/catalog/products/<slug>/      one product by slug

Rules:
- AllowAny (public); the record service decides what is listable
- Throttled to reduce scraping
- A failing record service yields an empty list, never a 500
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from catalog.api.serializers import FeaturedQuerySerializer, ProductSerializer
from catalog.services.products import get_product_by_slug, list_featured_products
from records.client import get_client


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class FeaturedProductsView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Catalog"],
        parameters=[
            OpenApiParameter(
                name="limit",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="How many of the newest products to return (default 8).",
            ),
        ],
        responses={
            200: ProductSerializer(many=True),
            400: OpenApiResponse(description="Bad request / validation error"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Newest products, as shown in the storefront's featured grid.",
    )
    def get(self, request):
        qs = FeaturedQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        products = list_featured_products(get_client(), qs.validated_data.get("limit"))
        return Response(ProductSerializer(products, many=True).data, status=status.HTTP_200_OK)


class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Catalog"],
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def get(self, request, slug):
        product = get_product_by_slug(get_client(), slug)
        if product is None:
            return Response({"detail": "Product not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)
