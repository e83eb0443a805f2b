# console/forms.py

from __future__ import annotations

from django import forms

from accounts.roles import ROLE_CHOICES, ROLE_USER
from catalog.services.products import create_slug

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields."


def _validate_image(upload):
    content_type = getattr(upload, "content_type", "") or ""
    if not content_type.startswith("image/"):
        raise forms.ValidationError("Upload a valid image file.")
    return upload


class ProductForm(forms.Form):
    name = forms.CharField(max_length=255)
    slug = forms.CharField(
        max_length=255,
        required=False,
        help_text="Generated from the name when left blank.",
    )
    description = forms.CharField(widget=forms.Textarea(attrs={"rows": 6}), required=False)
    price = forms.DecimalField(min_value=0, max_digits=12, decimal_places=2)
    stock = forms.IntegerField(min_value=0)
    image = forms.FileField(required=False, widget=forms.FileInput(attrs={"accept": "image/*"}))

    def __init__(self, *args, require_image: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.require_image = require_image
        self.fields["image"].required = require_image

    def clean_slug(self):
        slug = create_slug(self.cleaned_data.get("slug") or self.cleaned_data.get("name") or "")
        if not slug:
            raise forms.ValidationError("Enter a name or slug that contains letters or digits.")
        return slug

    def clean_image(self):
        upload = self.cleaned_data.get("image")
        if not upload:
            return None
        return _validate_image(upload)


class UserForm(forms.Form):
    firstname = forms.CharField(max_length=150, required=False)
    lastname = forms.CharField(max_length=150, required=False)
    email = forms.EmailField()
    phone_no = forms.CharField(max_length=32, required=False)
    role = forms.ChoiceField(choices=ROLE_CHOICES, initial=ROLE_USER)
    credit = forms.DecimalField(max_digits=12, decimal_places=2, required=False)
    address = forms.CharField(widget=forms.Textarea(attrs={"rows": 3}), required=False)
    verify_phone = forms.BooleanField(required=False, label="Phone verified")
    verified = forms.BooleanField(required=False, label="Email verified")
    avatar = forms.FileField(required=False, widget=forms.FileInput(attrs={"accept": "image/*"}))

    def clean_avatar(self):
        upload = self.cleaned_data.get("avatar")
        if not upload:
            return None
        return _validate_image(upload)

    @classmethod
    def initial_from_record(cls, record: dict) -> dict:
        return {
            "firstname": record.get("firstname") or "",
            "lastname": record.get("lastname") or "",
            "email": record.get("email") or "",
            "phone_no": record.get("phone_no") or "",
            "role": record.get("role") or ROLE_USER,
            "credit": record.get("credit") or 0,
            "address": record.get("address") or "",
            "verify_phone": bool(record.get("verify_phone")),
            "verified": bool(record.get("verified")),
        }
