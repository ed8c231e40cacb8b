# tests/test_product_service.py

"""Tests for the catalog HTTP client using mocked responses."""

import json
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

from tiliches.services.exceptions import (
    CatalogConnectionError,
    CatalogDecodeError,
    CatalogError,
    CatalogHTTPError,
)
from tiliches.services.product_service import ProductService
from tiliches.ui.formatting import format_price

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestProductService(unittest.TestCase):
    """ProductService.get_all_products against a mocked session."""

    def _make_response(
        self, payload: Any = None, status_code: int = 200
    ) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = payload
        return resp

    def _fixture(self) -> list[dict[str, Any]]:
        with open(FIXTURES_DIR / "products.json", encoding="utf-8") as f:
            data: list[dict[str, Any]] = json.load(f)
        return data

    def _service(self, resp: MagicMock | None = None) -> ProductService:
        service = ProductService(base_url="https://fakestoreapi.com/")
        service.session = MagicMock()
        if resp is not None:
            service.session.get.return_value = resp
        return service

    def test_products_url(self) -> None:
        """The endpoint is {base}/products."""
        service = self._service()
        self.assertEqual(
            service.products_url, "https://fakestoreapi.com/products"
        )

    def test_products_url_without_trailing_slash(self) -> None:
        """A base URL without a trailing slash still resolves."""
        service = ProductService(base_url="http://localhost:8080/api")
        self.assertEqual(
            service.products_url, "http://localhost:8080/api/products"
        )

    def test_default_base_url_from_settings(self) -> None:
        """Without an explicit base URL the settings value is used."""
        service = ProductService()
        self.assertEqual(service.base_url, service.settings.API_BASE_URL)

    def test_returns_products_in_response_order(self) -> None:
        """Decoded products keep the API order."""
        service = self._service(self._make_response(self._fixture()))
        products = service.get_all_products()
        self.assertEqual([p.id for p in products], [1, 9, 5])
        self.assertEqual(products[1].category, "electronics")
        self.assertEqual(products[1].price, 64.0)

    def test_request_uses_timeout_and_headers(self) -> None:
        """The GET carries the configured timeout and JSON headers."""
        service = self._service(self._make_response([]))
        service.get_all_products()
        _, kwargs = service.session.get.call_args
        self.assertEqual(
            kwargs["timeout"], service.settings.REQUEST_TIMEOUT
        )
        self.assertEqual(kwargs["headers"]["Accept"], "application/json")

    def test_empty_array_is_not_an_error(self) -> None:
        """An empty catalog decodes to an empty list."""
        service = self._service(self._make_response([]))
        self.assertEqual(service.get_all_products(), [])

    def test_transport_error_raises_connection_error(self) -> None:
        """A session exception becomes CatalogConnectionError."""
        service = self._service()
        service.session.get.side_effect = ConnectionError(
            "Connection refused"
        )
        with self.assertRaises(CatalogConnectionError) as ctx:
            service.get_all_products()
        self.assertIn("Connection refused", str(ctx.exception))

    def test_non_2xx_raises_http_error(self) -> None:
        """A 503 becomes CatalogHTTPError with the status code."""
        service = self._service(self._make_response(None, 503))
        with self.assertRaises(CatalogHTTPError) as ctx:
            service.get_all_products()
        self.assertEqual(ctx.exception.status_code, 503)
        self.assertIn("503", str(ctx.exception))

    def test_2xx_other_than_200_accepted(self) -> None:
        """Any 2xx status is a success."""
        service = self._service(self._make_response([], 203))
        self.assertEqual(service.get_all_products(), [])

    def test_invalid_json_raises_decode_error(self) -> None:
        """A body that is not JSON becomes CatalogDecodeError."""
        resp = self._make_response()
        resp.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        service = self._service(resp)
        with self.assertRaises(CatalogDecodeError):
            service.get_all_products()

    def test_non_array_payload_raises_decode_error(self) -> None:
        """A JSON object instead of an array is rejected."""
        service = self._service(self._make_response({"products": []}))
        with self.assertRaises(CatalogDecodeError):
            service.get_all_products()

    def test_malformed_item_raises_decode_error(self) -> None:
        """One broken element fails the whole decode."""
        payload = self._fixture()
        del payload[2]["price"]
        service = self._service(self._make_response(payload))
        with self.assertRaises(CatalogDecodeError) as ctx:
            service.get_all_products()
        self.assertIn("index 2", str(ctx.exception))

    def test_fractional_id_raises_decode_error(self) -> None:
        """Ids that would collide after truncation fail the decode."""
        payload = self._fixture()
        payload[0]["id"] = 1.9
        payload[1]["id"] = 1.2
        service = self._service(self._make_response(payload))
        with self.assertRaises(CatalogDecodeError):
            service.get_all_products()

    def test_huge_price_decodes_and_formats(self) -> None:
        """A 1e30 price is valid and still renders with cents."""
        payload = self._fixture()[:1]
        payload[0]["price"] = 1e30
        service = self._service(self._make_response(payload))
        products = service.get_all_products()
        self.assertEqual(
            format_price(products[0].price),
            "$1000000000000000000000000000000.00",
        )

    def test_all_errors_share_base_class(self) -> None:
        """Callers can catch every failure as CatalogError."""
        for exc_cls in (
            CatalogConnectionError,
            CatalogHTTPError,
            CatalogDecodeError,
        ):
            with self.subTest(exc=exc_cls.__name__):
                self.assertTrue(issubclass(exc_cls, CatalogError))

    @patch("tiliches.services.product_service.curl_requests.Session")
    def test_session_impersonates_browser(
        self, mock_session_cls: MagicMock
    ) -> None:
        """The session is created with the configured impersonation."""
        service = ProductService()
        mock_session_cls.assert_called_once_with(
            impersonate=service.settings.IMPERSONATE_BROWSER
        )


if __name__ == "__main__":
    unittest.main()
