# console/views/products.py

"""
CONSOLE: PRODUCTS

- GET       /console/products/              list (newest first)
- GET/POST  /console/products/new/          create (image required)
- GET/POST  /console/products/<id>/edit/    update (image optional)
- GET/POST  /console/products/<id>/delete/  confirm, then delete
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import redirect
from django.views.generic import FormView, TemplateView

from catalog.services.products import (
    create_product,
    delete_product,
    get_product,
    list_all_products,
    update_product,
)
from console.forms import REQUIRED_FIELDS_MESSAGE, ProductForm
from console.views.base import ConsoleView, RecordObjectMixin
from records.exceptions import RecordServiceError

logger = logging.getLogger(__name__)

LIST_FAILED = "Failed to load products. Please try again later."
LIST_EMPTY = "No products found."


def _has_missing_required(form) -> bool:
    return any(
        error.code == "required"
        for errors in form.errors.as_data().values()
        for error in errors
    )


class ProductListView(ConsoleView, TemplateView):
    template_name = "console/products/list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["empty_message"] = LIST_EMPTY
        try:
            context["products"] = list_all_products(self.client)
        except RecordServiceError as exc:
            logger.warning("Product list failed: %s", exc.message, extra={"status": exc.status})
            context["products"] = []
            context["error"] = LIST_FAILED
        return context


class ProductFormMixin:
    template_name = "console/products/form.html"
    form_class = ProductForm

    def form_invalid(self, form):
        if _has_missing_required(form):
            messages.error(self.request, REQUIRED_FIELDS_MESSAGE)
        return super().form_invalid(form)


class ProductCreateView(ConsoleView, ProductFormMixin, FormView):
    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["require_image"] = True
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({"title": "Add New Product", "submit_label": "Create Product"})
        return context

    def form_valid(self, form):
        data = dict(form.cleaned_data)
        image = data.pop("image", None)
        try:
            create_product(self.client, data, image, created_by=self.request.shop_user.id)
        except RecordServiceError as exc:
            messages.error(self.request, f"Failed to create product: {exc.message}")
            return self.render_to_response(self.get_context_data(form=form))

        messages.success(self.request, "Product created successfully!")
        return redirect("console:product-list")


class ProductUpdateView(ConsoleView, RecordObjectMixin, ProductFormMixin, FormView):
    load_error_message = "Could not load product data."
    list_url_name = "console:product-list"

    def load_object(self, pk):
        return get_product(self.client, pk)

    def get_initial(self):
        product = self.object
        return {
            "name": product.name,
            "slug": product.slug,
            "description": product.description,
            "price": product.price,
            "stock": product.stock,
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "title": "Edit Product",
                "submit_label": "Save Changes",
                "product": self.object,
            }
        )
        return context

    def form_valid(self, form):
        data = dict(form.cleaned_data)
        image = data.pop("image", None)
        try:
            update_product(self.client, self.object.id, data, image=image)
        except RecordServiceError as exc:
            messages.error(self.request, f"Failed to update product: {exc.message}")
            return self.render_to_response(self.get_context_data(form=form))

        messages.success(self.request, "Product updated successfully!")
        return redirect("console:product-list")


class ProductDeleteView(ConsoleView, RecordObjectMixin, TemplateView):
    template_name = "console/confirm_delete.html"
    load_error_message = "Could not load product data."
    list_url_name = "console:product-list"

    def load_object(self, pk):
        return get_product(self.client, pk)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "question": f'Delete "{self.object.name}"?',
                "cancel_url_name": self.list_url_name,
            }
        )
        return context

    def post(self, request, *args, **kwargs):
        try:
            delete_product(self.client, self.object.id)
        except RecordServiceError as exc:
            messages.error(request, f"Failed to delete product: {exc.message}")
        else:
            messages.success(request, "Product deleted successfully!")
        return redirect(self.list_url_name)
