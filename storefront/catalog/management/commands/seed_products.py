from django.core.management.base import BaseCommand, CommandError

from catalog.services.products import PRODUCTS, create_slug, product_payload
from records.client import filter_equals, get_client
from records.exceptions import RecordNotFound, RecordServiceError

DEMO_PRODUCTS = [
    ("Classic Cotton T-Shirt", "19.99", 120, "<p>Soft, breathable everyday tee.</p>"),
    ("Slim Fit Denim Jeans", "49.50", 60, "<p>Stretch denim with a modern slim cut.</p>"),
    ("Wireless Earbuds", "89.00", 35, "<p>Up to 24 hours of battery with the case.</p>"),
    ("Leather Card Wallet", "29.95", 0, "<p>Full-grain leather, holds six cards.</p>"),
    ("Stainless Water Bottle", "24.00", 8, "<p>Keeps drinks cold for 24 hours.</p>"),
]


class Command(BaseCommand):
    help = "Seed demo products into the record service (skips existing slugs)"

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True, help="Admin account email")
        parser.add_argument("--password", required=True, help="Admin account password")

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding products..."))

        client = get_client()
        try:
            auth = client.auth_with_password("users", options["email"], options["password"])
        except RecordServiceError as exc:
            raise CommandError(f"Admin login failed: {exc.message}") from exc

        admin_id = (auth.get("record") or {}).get("id", "")
        created = skipped = 0

        for name, price, stock, description in DEMO_PRODUCTS:
            slug = create_slug(name)
            try:
                client.get_first_list_item(PRODUCTS, filter_equals("slug", slug))
            except RecordNotFound:
                pass
            else:
                skipped += 1
                self.stdout.write(f"  - {slug} exists, skipped")
                continue

            payload = product_payload(
                {
                    "name": name,
                    "slug": slug,
                    "description": description,
                    "price": price,
                    "stock": stock,
                }
            )
            payload["created_by"] = admin_id
            try:
                client.create(PRODUCTS, payload)
            except RecordServiceError as exc:
                raise CommandError(f"Could not create {slug}: {exc.display_message('Create failed')}") from exc
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Products seeded: {created} created, {skipped} skipped.")
        )
