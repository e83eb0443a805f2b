# catalog/apps.py

"""
CATALOG APP CONFIG

Public storefront over the record service `products` collection:
- Home page (hero slider + featured products)
- Product detail by slug + add-to-cart intent
- Public catalog JSON API
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Storefront Catalog"
