# console/api/views.py
"""
CONSOLE API (admin only)

GET/POST           /api/console/products/
GET/PATCH/DELETE   /api/console/products/<id>/
GET                /api/console/users/
GET/PATCH/DELETE   /api/console/users/<id>/

Requests are forwarded with the caller's own record service token, so
the service's collection rules still apply on top of IsConsoleAdmin.
Record service errors are mapped by records.api.exception_handler.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.api.permissions import IsConsoleAdmin
from catalog.services.products import (
    create_product,
    delete_product,
    get_product,
    list_all_products,
    update_product,
)
from console.api.serializers import (
    ConsoleProductSerializer,
    ConsoleUserSerializer,
    ProductWriteSerializer,
    UserUpdateSerializer,
)
from console.services.users import delete_user, get_user, list_users, update_user
from records.client import get_client


class ConsoleAPIView(APIView):
    permission_classes = [IsConsoleAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def record_client(self):
        return get_client(token=self.request.user.token)


# =========================================================
# PRODUCTS
# =========================================================
class ProductListCreateView(ConsoleAPIView):
    @extend_schema(tags=["Console"], responses={200: ConsoleProductSerializer(many=True)})
    def get(self, request):
        products = list_all_products(self.record_client())
        return Response(ConsoleProductSerializer(products, many=True).data)

    @extend_schema(
        tags=["Console"],
        request=ProductWriteSerializer,
        responses={
            201: ConsoleProductSerializer,
            400: OpenApiResponse(description="Validation error"),
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop("image", None)

        product = create_product(self.record_client(), data, image, created_by=request.user.id)
        return Response(ConsoleProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailView(ConsoleAPIView):
    @extend_schema(
        tags=["Console"],
        responses={200: ConsoleProductSerializer, 404: OpenApiResponse(description="Not found")},
    )
    def get(self, request, pk):
        return Response(ConsoleProductSerializer(get_product(self.record_client(), pk)).data)

    @extend_schema(tags=["Console"], request=ProductWriteSerializer, responses={200: ConsoleProductSerializer})
    def patch(self, request, pk):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop("image", None)

        product = update_product(self.record_client(), pk, data, image=image)
        return Response(ConsoleProductSerializer(product).data)

    @extend_schema(tags=["Console"], responses={204: None})
    def delete(self, request, pk):
        delete_product(self.record_client(), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


# =========================================================
# USERS
# =========================================================
class UserListView(ConsoleAPIView):
    @extend_schema(tags=["Console"], responses={200: ConsoleUserSerializer(many=True)})
    def get(self, request):
        return Response(ConsoleUserSerializer(list_users(self.record_client()), many=True).data)


class UserDetailView(ConsoleAPIView):
    @extend_schema(
        tags=["Console"],
        responses={200: ConsoleUserSerializer, 404: OpenApiResponse(description="Not found")},
    )
    def get(self, request, pk):
        return Response(ConsoleUserSerializer(get_user(self.record_client(), pk)).data)

    @extend_schema(tags=["Console"], request=UserUpdateSerializer, responses={200: ConsoleUserSerializer})
    def patch(self, request, pk):
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        avatar = data.pop("avatar", None)

        user = update_user(self.record_client(), pk, data, avatar=avatar)
        return Response(ConsoleUserSerializer(user).data)

    @extend_schema(tags=["Console"], responses={204: None})
    def delete(self, request, pk):
        delete_user(self.record_client(), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
