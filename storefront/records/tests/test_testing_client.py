from django.test import SimpleTestCase

from records.exceptions import RecordNotFound, RecordPermissionDenied, RecordValidationError
from records.testing import (
    InMemoryRecordClient,
    issue_token,
    reset_store,
    seed_record,
    seed_user,
    stored,
)


class InMemoryRecordClientTests(SimpleTestCase):
    """
    The in-memory client enforces the same collection rules the
    storefront depends on in the real service.
    """

    def setUp(self):
        reset_store()
        self.admin = seed_user("admin@example.com", role="admin")
        self.user = seed_user("user@example.com")

    def _client(self, record=None):
        token = issue_token(record) if record else ""
        return InMemoryRecordClient("http://records.test", token=token)

    def test_products_are_public_and_sorted(self):
        seed_record("products", name="Old", slug="old")
        seed_record("products", name="New", slug="new")

        page = self._client().get_list("products", 1, 10, sort="-created")

        self.assertEqual([p["name"] for p in page.items], ["New", "Old"])
        self.assertEqual(page.total_items, 2)

    def test_filter_by_slug(self):
        seed_record("products", name="Shoe", slug="shoe")

        record = self._client().get_first_list_item("products", 'slug="shoe"')
        self.assertEqual(record["name"], "Shoe")

        with self.assertRaises(RecordNotFound):
            self._client().get_first_list_item("products", 'slug="boot"')

    def test_unsupported_filter_is_rejected(self):
        with self.assertRaises(RecordValidationError):
            self._client().get_list("products", filter="stock > 0")

    def test_product_writes_need_admin(self):
        with self.assertRaises(RecordPermissionDenied) as ctx:
            self._client(self.user).create("products", {"name": "X", "slug": "x"})
        self.assertEqual(ctx.exception.status, 403)

        with self.assertRaises(RecordPermissionDenied) as ctx:
            self._client().create("products", {"name": "X", "slug": "x"})
        self.assertEqual(ctx.exception.status, 401)

        created = self._client(self.admin).create("products", {"name": "X", "slug": "x"})
        self.assertEqual(stored("products", created["id"])["name"], "X")

    def test_duplicate_slug_is_a_field_error(self):
        admin = self._client(self.admin)
        admin.create("products", {"name": "X", "slug": "x"})

        with self.assertRaises(RecordValidationError) as ctx:
            admin.create("products", {"name": "X2", "slug": "x"})
        self.assertIn("slug", ctx.exception.field_errors())

    def test_user_listing_requires_admin(self):
        with self.assertRaises(RecordPermissionDenied):
            self._client(self.user).get_list("users")

        page = self._client(self.admin).get_list("users")
        self.assertEqual(page.total_items, 2)

    def test_users_see_only_themselves(self):
        client = self._client(self.user)

        self.assertEqual(client.get_one("users", self.user["id"])["email"], "user@example.com")
        with self.assertRaises(RecordNotFound):
            client.get_one("users", self.admin["id"])

    def test_registration_validation(self):
        client = self._client()

        with self.assertRaises(RecordValidationError) as ctx:
            client.create("users", {"email": "user@example.com", "password": "password123",
                                    "passwordConfirm": "password123"})
        self.assertIn("email", ctx.exception.field_errors())

        with self.assertRaises(RecordValidationError) as ctx:
            client.create("users", {"email": "new@example.com", "password": "short",
                                    "passwordConfirm": "short"})
        self.assertIn("password", ctx.exception.field_errors())

        record = client.create("users", {"email": "new@example.com", "password": "password123",
                                         "passwordConfirm": "password123"})
        self.assertEqual(record["role"], "user")
        self.assertNotIn("password", record)

    def test_password_auth_and_refresh(self):
        client = self._client()

        auth = client.auth_with_password("users", "USER@example.com", "password123")
        self.assertEqual(auth["record"]["id"], self.user["id"])
        self.assertEqual(client.token, auth["token"])

        refreshed = client.auth_refresh("users")
        self.assertEqual(refreshed["record"]["id"], self.user["id"])

        with self.assertRaises(RecordValidationError):
            self._client().auth_with_password("users", "user@example.com", "wrong-password")

    def test_refresh_with_unknown_token_is_401(self):
        client = InMemoryRecordClient("http://records.test", token="bogus")

        with self.assertRaises(RecordPermissionDenied) as ctx:
            client.auth_refresh("users")
        self.assertEqual(ctx.exception.status, 401)
