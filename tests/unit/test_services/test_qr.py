"""Unit tests for QR rendering."""
import base64

import pytest

from app.services.qr import generate_qr_code, qr_data_url


@pytest.mark.unit
class TestQrCode:

    def test_generate_svg(self):
        svg = generate_qr_code("https://event.example/scan?token=abc").getvalue()
        assert b"<svg" in svg

    def test_data_url_is_deterministic(self):
        url = "https://event.example/scan?token=abc"
        assert qr_data_url(url) == qr_data_url(url)

    def test_data_url_differs_per_input(self):
        assert qr_data_url("https://a.example") != qr_data_url("https://b.example")

    def test_data_url_decodes_to_svg(self):
        data_url = qr_data_url("hello")
        prefix = "data:image/svg+xml;base64,"
        assert data_url.startswith(prefix)
        assert b"<svg" in base64.b64decode(data_url[len(prefix):])
