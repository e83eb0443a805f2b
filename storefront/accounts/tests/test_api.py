from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient, APIRequestFactory

from accounts.api.permissions import IsConsoleAdmin
from accounts.users import AnonymousShopUser, ShopUser
from records.testing import issue_token, reset_store, seed_user


class AuthApiTests(TestCase):
    """
    GUARANTEES:
    - Login returns the record service token + a safe user payload
    - Bearer tokens are validated against the record service
    - Register mirrors the page's validation rules
    """

    def setUp(self):
        reset_store()
        self.client = APIClient()
        self.user = seed_user("user@example.com", firstname="Ada", lastname="Lovelace")

    def test_login_returns_token_and_user(self):
        response = self.client.post(
            reverse("accounts-api:login"),
            {"email": "user@example.com", "password": "password123"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["token"])
        self.assertEqual(response.data["user"]["email"], "user@example.com")
        self.assertFalse(response.data["user"]["is_admin"])
        self.assertNotIn("password", response.data["user"])

    def test_login_with_bad_credentials_is_401(self):
        response = self.client.post(
            reverse("accounts-api:login"),
            {"email": "user@example.com", "password": "wrong-password"},
            format="json",
        )
        self.assertEqual(response.status_code, 401)

    def test_register_creates_user(self):
        response = self.client.post(
            reverse("accounts-api:register"),
            {
                "email": "new@example.com",
                "password": "password123",
                "password_confirm": "password123",
            },
            format="json",
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["role"], "user")

    def test_register_password_mismatch(self):
        response = self.client.post(
            reverse("accounts-api:register"),
            {
                "email": "new@example.com",
                "password": "password123",
                "password_confirm": "password124",
            },
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("password_confirm", response.data)

    def test_register_duplicate_email_surfaces_field_error(self):
        response = self.client.post(
            reverse("accounts-api:register"),
            {
                "email": "user@example.com",
                "password": "password123",
                "password_confirm": "password123",
            },
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.data["errors"])

    def test_me_with_bearer_token(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")

        response = self.client.get(reverse("accounts-api:me"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["id"], self.user["id"])
        self.assertEqual(response.data["firstname"], "Ada")

    def test_me_without_token_is_401(self):
        response = self.client.get(reverse("accounts-api:me"))
        self.assertEqual(response.status_code, 401)

    def test_me_with_unknown_token_is_401(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
        response = self.client.get(reverse("accounts-api:me"))
        self.assertEqual(response.status_code, 401)


class ConsolePermissionTests(TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def _request_for(self, user):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_admin_allowed(self):
        admin = ShopUser({"id": "a1", "role": "admin"})
        self.assertTrue(IsConsoleAdmin().has_permission(self._request_for(admin), None))

    def test_user_denied(self):
        user = ShopUser({"id": "u1", "role": "user"})
        self.assertFalse(IsConsoleAdmin().has_permission(self._request_for(user), None))

    def test_anonymous_denied(self):
        request = self._request_for(AnonymousShopUser())
        self.assertFalse(IsConsoleAdmin().has_permission(request, None))


class ShopUserTests(TestCase):
    def test_display_name_falls_back(self):
        self.assertEqual(ShopUser({"firstname": "Ada", "lastname": ""}).display_name, "Ada")
        self.assertEqual(ShopUser({}).display_name, "N/A")

    def test_role_defaults_to_user(self):
        user = ShopUser({"id": "u1"})
        self.assertEqual(user.role, "user")
        self.assertFalse(user.is_admin)
