# console/api/serializers.py

from rest_framework import serializers

from accounts.roles import ROLE_CHOICES
from catalog.api.serializers import ProductSerializer
from catalog.services.products import create_slug


# ---------------- PRODUCTS ----------------
class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    slug = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    stock = serializers.IntegerField(min_value=0)
    image = serializers.FileField(required=False)

    def validate(self, attrs):
        if "slug" in attrs or not self.partial:
            attrs["slug"] = create_slug(attrs.get("slug") or attrs.get("name") or "")
            if not attrs["slug"]:
                raise serializers.ValidationError({"slug": "Slug cannot be empty."})
        return attrs


class ConsoleProductSerializer(ProductSerializer):
    created_by = serializers.CharField(read_only=True)


# ---------------- USERS ----------------
class ConsoleUserSerializer(serializers.Serializer):
    id = serializers.CharField(source="record.id")
    email = serializers.CharField(source="record.email", default="")
    firstname = serializers.CharField(source="record.firstname", default="")
    lastname = serializers.CharField(source="record.lastname", default="")
    phone_no = serializers.CharField(source="record.phone_no", default="")
    role = serializers.CharField()
    credit = serializers.FloatField(source="record.credit", default=0)
    address = serializers.CharField(source="record.address", default="")
    verify_phone = serializers.BooleanField(source="record.verify_phone", default=False)
    verified = serializers.BooleanField()
    avatar = serializers.CharField()
    display_name = serializers.CharField()
    created = serializers.CharField()


class UserUpdateSerializer(serializers.Serializer):
    firstname = serializers.CharField(required=False, allow_blank=True)
    lastname = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField(required=False)
    phone_no = serializers.CharField(required=False, allow_blank=True)
    role = serializers.ChoiceField(choices=ROLE_CHOICES, required=False)
    credit = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    address = serializers.CharField(required=False, allow_blank=True)
    verify_phone = serializers.BooleanField(required=False)
    verified = serializers.BooleanField(required=False)
    avatar = serializers.FileField(required=False)
