from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings

from records.client import RecordClient, RecordPage, filter_equals, get_client
from records.exceptions import (
    RecordNotFound,
    RecordPermissionDenied,
    RecordServiceError,
    RecordServiceUnavailable,
    RecordValidationError,
)
from records.testing import InMemoryRecordClient


def _response(status_code=200, payload=None, text=None):
    resp = mock.Mock()
    resp.status_code = status_code
    if payload is None:
        resp.json.side_effect = ValueError("no json")
        resp.text = text or ""
    else:
        resp.json.return_value = payload
        resp.text = text or str(payload)
    return resp


class RecordClientTransportTests(SimpleTestCase):
    """
    HTTP-level behaviour of RecordClient.

    GUARANTEES:
    - One request per call, against the collection records endpoint
    - Service errors surface as typed exceptions with the service message
    - Transport failures never leak raw requests exceptions
    """

    def setUp(self):
        self.session = mock.Mock()
        self.client = RecordClient("http://pb.local/", session=self.session, timeout=3)

    # --------------------------------------------------
    # Reads
    # --------------------------------------------------

    def test_get_list_sends_query_and_parses_page(self):
        self.session.request.return_value = _response(
            payload={
                "page": 1,
                "perPage": 8,
                "totalItems": 2,
                "totalPages": 1,
                "items": [{"id": "a"}, {"id": "b"}],
            }
        )

        page = self.client.get_list("products", 1, 8, sort="-created")

        self.assertIsInstance(page, RecordPage)
        self.assertEqual(page.total_items, 2)
        self.assertEqual([item["id"] for item in page.items], ["a", "b"])

        method, url = self.session.request.call_args.args
        kwargs = self.session.request.call_args.kwargs
        self.assertEqual(method, "GET")
        self.assertEqual(url, "http://pb.local/api/collections/products/records")
        self.assertEqual(kwargs["params"], {"page": 1, "perPage": 8, "sort": "-created"})
        self.assertEqual(kwargs["timeout"], 3)
        self.assertNotIn("Authorization", kwargs["headers"])

    def test_get_full_list_walks_every_page(self):
        self.session.request.side_effect = [
            _response(payload={"page": 1, "perPage": 2, "totalItems": 3, "totalPages": 2,
                               "items": [{"id": "1"}, {"id": "2"}]}),
            _response(payload={"page": 2, "perPage": 2, "totalItems": 3, "totalPages": 2,
                               "items": [{"id": "3"}]}),
        ]

        items = self.client.get_full_list("products", sort="-created", batch=2)

        self.assertEqual([item["id"] for item in items], ["1", "2", "3"])
        self.assertEqual(self.session.request.call_count, 2)

    def test_get_first_list_item_raises_not_found_on_empty_page(self):
        self.session.request.return_value = _response(
            payload={"page": 1, "perPage": 1, "totalItems": -1, "totalPages": -1, "items": []}
        )

        with self.assertRaises(RecordNotFound):
            self.client.get_first_list_item("products", filter_equals("slug", "missing"))

        params = self.session.request.call_args.kwargs["params"]
        self.assertEqual(params["filter"], 'slug="missing"')
        self.assertEqual(params["skipTotal"], 1)

    # --------------------------------------------------
    # Errors
    # --------------------------------------------------

    def test_404_maps_to_not_found_with_service_message(self):
        self.session.request.return_value = _response(
            404, {"code": 404, "message": "The requested resource wasn't found.", "data": {}}
        )

        with self.assertRaises(RecordNotFound) as ctx:
            self.client.get_one("products", "nope")

        self.assertEqual(ctx.exception.message, "The requested resource wasn't found.")
        self.assertEqual(ctx.exception.status, 404)

    def test_400_carries_field_errors(self):
        self.session.request.return_value = _response(
            400,
            {
                "code": 400,
                "message": "Failed to update record.",
                "data": {"email": {"code": "validation_invalid_email", "message": "Invalid email."}},
            },
        )

        with self.assertRaises(RecordValidationError) as ctx:
            self.client.update("users", "u1", {"email": "x"})

        self.assertEqual(ctx.exception.field_errors(), {"email": "Invalid email."})
        self.assertEqual(ctx.exception.display_message(), "Update failed: email: Invalid email.")

    def test_403_maps_to_permission_denied(self):
        self.session.request.return_value = _response(
            403, {"code": 403, "message": "Only admins can perform this action.", "data": {}}
        )

        with self.assertRaises(RecordPermissionDenied):
            self.client.delete("products", "p1")

    def test_timeout_maps_to_unavailable(self):
        self.session.request.side_effect = requests.Timeout("slow")

        with self.assertRaises(RecordServiceUnavailable):
            self.client.health()

    def test_connection_error_maps_to_unavailable(self):
        self.session.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(RecordServiceUnavailable):
            self.client.get_list("products")

    def test_non_json_success_maps_to_unavailable(self):
        self.session.request.return_value = _response(200, None, text="<html>proxy</html>")

        with self.assertRaises(RecordServiceUnavailable):
            self.client.get_one("products", "p1")

    def test_5xx_without_json_uses_body_preview(self):
        self.session.request.return_value = _response(502, None, text="Bad Gateway")

        with self.assertRaises(RecordServiceUnavailable) as ctx:
            self.client.get_one("products", "p1")

        self.assertEqual(ctx.exception.message, "Bad Gateway")

    def test_delete_accepts_204(self):
        self.session.request.return_value = _response(204)

        self.assertIsNone(self.client.delete("products", "p1"))
        self.assertEqual(self.session.request.call_args.args[0], "DELETE")

    # --------------------------------------------------
    # Writes + auth
    # --------------------------------------------------

    def test_create_with_files_is_multipart(self):
        self.session.request.return_value = _response(payload={"id": "p1"})
        upload = mock.Mock()
        upload.name = "shoe.png"
        upload.content_type = "image/png"

        self.client.create("products", {"name": "Shoe", "price": 9.5, "featured": True},
                           files={"image": upload})

        kwargs = self.session.request.call_args.kwargs
        self.assertNotIn("json", kwargs)
        self.assertEqual(kwargs["data"], {"name": "Shoe", "price": "9.5", "featured": "true"})
        self.assertEqual(kwargs["files"]["image"], ("shoe.png", upload, "image/png"))

    def test_create_without_files_is_json(self):
        self.session.request.return_value = _response(payload={"id": "p1"})

        self.client.create("products", {"name": "Shoe"})

        kwargs = self.session.request.call_args.kwargs
        self.assertEqual(kwargs["json"], {"name": "Shoe"})

    def test_auth_with_password_keeps_token_for_later_calls(self):
        self.session.request.side_effect = [
            _response(payload={"token": "tok-1", "record": {"id": "u1"}}),
            _response(payload={"id": "u1"}),
        ]

        self.client.auth_with_password("users", "a@b.co", "secret123")
        self.client.get_one("users", "u1")

        self.assertEqual(self.client.token, "tok-1")
        headers = self.session.request.call_args.kwargs["headers"]
        self.assertEqual(headers["Authorization"], "tok-1")

    def test_auth_refresh_requires_token(self):
        with self.assertRaises(RecordServiceError):
            self.client.auth_refresh("users")
        self.session.request.assert_not_called()


class RecordClientHelperTests(SimpleTestCase):
    def test_filter_equals_escapes_quotes_and_backslashes(self):
        self.assertEqual(filter_equals("slug", 'a"b\\c'), 'slug="a\\"b\\\\c"')

    def test_file_url(self):
        client = RecordClient("http://pb.local")
        record = {"id": "r1", "collectionId": "pbc_1"}

        self.assertEqual(
            client.file_url(record, "img.png"),
            "http://pb.local/api/files/pbc_1/r1/img.png",
        )
        self.assertEqual(
            client.file_url(record, "img.png", thumb="100x100"),
            "http://pb.local/api/files/pbc_1/r1/img.png?thumb=100x100",
        )
        self.assertEqual(client.file_url(record, ""), "")

    @override_settings(
        RECORD_CLIENT_CLASS="records.testing.InMemoryRecordClient",
        POCKETBASE_URL="http://records.test",
        POCKETBASE_TIMEOUT=2.5,
    )
    def test_get_client_builds_configured_class(self):
        client = get_client(token="abc")

        self.assertIsInstance(client, InMemoryRecordClient)
        self.assertEqual(client.base_url, "http://records.test")
        self.assertEqual(client.token, "abc")
        self.assertEqual(client.timeout, 2.5)
