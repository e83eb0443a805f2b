# catalog/forms.py

from __future__ import annotations

from django import forms

from catalog.services.products import quantity_choices


class AddToCartForm(forms.Form):
    quantity = forms.TypedChoiceField(coerce=int, choices=(), initial=1)

    def __init__(self, *args, product=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.product = product
        stock = product.stock if product is not None else 0
        self.fields["quantity"].choices = [(n, str(n)) for n in quantity_choices(stock)]
        if not self.fields["quantity"].choices:
            self.fields["quantity"].disabled = True
