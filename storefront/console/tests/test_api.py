from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from records.testing import issue_token, reset_store, seed_record, seed_user, stored


class ConsoleApiTests(TestCase):
    """
    GUARANTEES:
    - Only admins reach the console API
    - Writes go to the record service as the calling admin
    - Service validation errors come back as 400 with field errors
    """

    def setUp(self):
        reset_store()
        self.client = APIClient()
        self.admin = seed_user("admin@example.com", role="admin")
        self.user = seed_user("user@example.com", firstname="Bob")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.admin)}")

    def test_non_admin_forbidden(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")

        response = client.get(reverse("console-api:product-list"))

        self.assertEqual(response.status_code, 403)

    def test_anonymous_unauthorized(self):
        response = APIClient().get(reverse("console-api:user-list"))
        self.assertEqual(response.status_code, 401)

    def test_create_product_json(self):
        response = self.client.post(
            reverse("console-api:product-list"),
            {"name": "Desk Lamp", "price": "24.50", "stock": 3},
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["slug"], "desk-lamp")
        self.assertEqual(response.data["created_by"], self.admin["id"])

    def test_create_product_with_image(self):
        image = SimpleUploadedFile("lamp.png", b"\x89PNG\r\n\x1a\n", content_type="image/png")

        response = self.client.post(
            reverse("console-api:product-list"),
            {"name": "Desk Lamp", "price": "24.50", "stock": 3, "image": image},
            format="multipart",
        )

        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.data["image_url"].endswith("/lamp.png"))

    def test_duplicate_slug_is_400_with_errors(self):
        seed_record("products", name="Desk Lamp", slug="desk-lamp", price=1, stock=1)

        response = self.client.post(
            reverse("console-api:product-list"),
            {"name": "Desk Lamp", "price": "24.50", "stock": 3},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("slug", response.data["errors"])

    def test_patch_and_delete_product(self):
        product = seed_record("products", name="Lamp", slug="lamp", price=5, stock=1)
        url = reverse("console-api:product-detail", kwargs={"pk": product["id"]})

        patched = self.client.patch(url, {"stock": 9}, format="json")
        self.assertEqual(patched.status_code, 200)
        self.assertEqual(stored("products", product["id"])["stock"], 9)
        self.assertEqual(stored("products", product["id"])["slug"], "lamp")

        deleted = self.client.delete(url)
        self.assertEqual(deleted.status_code, 204)
        self.assertIsNone(stored("products", product["id"]))

        missing = self.client.get(url)
        self.assertEqual(missing.status_code, 404)

    def test_users_list_and_update(self):
        listing = self.client.get(reverse("console-api:user-list"))
        self.assertEqual(listing.status_code, 200)
        self.assertEqual(len(listing.data), 2)

        url = reverse("console-api:user-detail", kwargs={"pk": self.user["id"]})
        response = self.client.patch(url, {"role": "admin", "credit": "5.00"}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["role"], "admin")
        self.assertEqual(stored("users", self.user["id"])["credit"], 5.0)
        self.assertEqual(stored("users", self.user["id"])["firstname"], "Bob")

    def test_delete_user(self):
        url = reverse("console-api:user-detail", kwargs={"pk": self.user["id"]})

        self.assertEqual(self.client.delete(url).status_code, 204)
        self.assertIsNone(stored("users", self.user["id"]))
