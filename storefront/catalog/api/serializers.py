# catalog/api/serializers.py

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    price = serializers.FloatField(read_only=True)
    stock = serializers.IntegerField()
    in_stock = serializers.BooleanField(read_only=True)
    image_url = serializers.CharField(source="display_image_url", read_only=True)
    created = serializers.CharField(read_only=True)
    updated = serializers.CharField(read_only=True)


class FeaturedQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100)
