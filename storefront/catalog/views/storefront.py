# catalog/views/storefront.py

"""
STOREFRONT PAGES

- GET  /                              hero slider + featured products
- GET  /product/<slug>/               product detail + add-to-cart form
- POST /product/<slug>/add-to-cart/   record the cart intent, flash, redirect back

Products are public: every read uses the visitor's session token when
present, anonymous otherwise.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect
from django.urls import reverse
from django.views import View
from django.views.generic import TemplateView

from accounts.session import backend_client
from catalog.carousel import AUTOPLAY_INTERVAL_MS, FALLBACK_IMAGE_URL, SLIDE_OFFSET_PX, Carousel
from catalog.forms import AddToCartForm
from catalog.services.cart import CartError, add_to_cart_intent
from catalog.services.products import get_product_by_slug, list_featured_products

logger = logging.getLogger(__name__)

# how long the "Added!" confirmation stays before the button re-enables
ADDED_RESET_MS = 2000


class HomeView(TemplateView):
    template_name = "catalog/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        carousel = Carousel.from_query(
            page=self.request.GET.get("slide"),
            direction=self.request.GET.get("dir"),
        )
        context.update(
            {
                "carousel": carousel,
                "autoplay_interval_ms": AUTOPLAY_INTERVAL_MS,
                "slide_offset_px": SLIDE_OFFSET_PX,
                "slide_fallback_url": FALLBACK_IMAGE_URL,
                "products": list_featured_products(backend_client(self.request)),
            }
        )
        return context


def _load_product(request, slug):
    product = get_product_by_slug(backend_client(request), slug)
    if product is None:
        raise Http404("Product not found")
    return product


class ProductDetailView(TemplateView):
    template_name = "catalog/product_detail.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        product = _load_product(self.request, kwargs["slug"])
        context.update(
            {
                "product": product,
                "form": kwargs.get("form") or AddToCartForm(product=product),
                "added": product.in_stock and self.request.GET.get("added") == "1",
                "added_reset_ms": ADDED_RESET_MS,
            }
        )
        return context


class AddToCartView(View):
    http_method_names = ["post"]

    def post(self, request, slug):
        product = _load_product(request, slug)
        detail_url = reverse("catalog:product-detail", kwargs={"slug": product.slug or slug})

        if not product.in_stock:
            messages.error(request, f"{product.name} is out of stock.")
            return redirect(detail_url)

        form = AddToCartForm(request.POST, product=product)
        if not form.is_valid():
            messages.error(request, "Please choose a valid quantity.")
            return redirect(detail_url)

        try:
            add_to_cart_intent(request.session, product, form.cleaned_data["quantity"])
        except CartError as exc:
            messages.error(request, str(exc))
            return redirect(detail_url)

        messages.success(request, f"{product.name} added to cart!")
        return redirect(f"{detail_url}?added=1")
