from django.test import SimpleTestCase

from catalog.templatetags.catalog_tags import NO_DESCRIPTION, description_html, price, record_date


class CatalogFilterTests(SimpleTestCase):
    def test_price(self):
        self.assertEqual(price("1234.5"), "$1,234.50")

    def test_description_keeps_markup(self):
        html = "<p>Soft <strong>cotton</strong></p>"
        self.assertEqual(description_html(html), html)

    def test_description_keeps_safe_links_and_images(self):
        cleaned = description_html(
            '<a href="https://example.com/care">Care</a><img src="https://example.com/a.png" alt="A">'
        )
        self.assertIn('href="https://example.com/care"', cleaned)
        self.assertIn('src="https://example.com/a.png"', cleaned)

    def test_description_strips_scripts_and_handlers(self):
        cleaned = description_html(
            '<p onclick="steal()">Hi</p><script>alert(1)</script>'
            '<a href="javascript:alert(1)">x</a>'
        )
        self.assertNotIn("script", cleaned)
        self.assertNotIn("onclick", cleaned)
        self.assertNotIn("alert", cleaned)
        self.assertIn("<p>Hi</p>", cleaned)


class DescriptionSanitizingTests(SimpleTestCase):
    """
    GUARANTEES:
    - Handlers written without leading whitespace are removed
    - Entity-encoded javascript: URLs are removed
    - Tags outside the formatting allowlist are dropped with their attributes
    """

    def test_slash_separated_event_handlers(self):
        for payload in ("<img/src=x/onerror=alert(1)>", "<svg/onload=alert(1)>"):
            with self.subTest(payload=payload):
                cleaned = description_html(payload)
                self.assertNotRegex(cleaned, r"<[^>]*\son\w+\s*=")
                self.assertNotIn("<svg", cleaned)

    def test_entity_encoded_javascript_url(self):
        cleaned = description_html('<a href="java&#115;cript:alert(1)">x</a>')
        self.assertNotIn("href", cleaned)
        self.assertNotIn("cript:", cleaned)
        self.assertIn(">x</a>", cleaned)

    def test_iframe_srcdoc(self):
        cleaned = description_html(
            '<iframe srcdoc="&lt;script&gt;alert(1)&lt;/script&gt;"></iframe><p>ok</p>'
        )
        self.assertNotIn("iframe", cleaned)
        self.assertNotIn("srcdoc", cleaned)
        self.assertIn("<p>ok</p>", cleaned)

    def test_nested_tags_do_not_rebuild_script(self):
        cleaned = description_html("<scr<script>ipt>alert(1)</script>")
        self.assertNotIn("<script", cleaned)

    def test_description_fallback(self):
        self.assertEqual(description_html(""), NO_DESCRIPTION)
        self.assertEqual(description_html("   "), NO_DESCRIPTION)


class RecordDateFilterTests(SimpleTestCase):
    def test_record_date(self):
        self.assertEqual(record_date("2024-01-05 10:00:00.000Z"), "Jan 5, 2024")
        self.assertEqual(record_date("not a date"), "not a date")
        self.assertEqual(record_date(""), "")
