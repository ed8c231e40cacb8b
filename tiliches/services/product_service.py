# tiliches/services/product_service.py

"""HTTP client for the Fake Store product catalog."""

import logging
from typing import Any
from urllib.parse import urljoin

from curl_cffi import requests as curl_requests

from tiliches.config.settings import Settings
from tiliches.models.product import Product
from tiliches.services.exceptions import (
    CatalogConnectionError,
    CatalogDecodeError,
    CatalogHTTPError,
)


class ProductService:
    """Fetches products from the catalog API.

    Every failure is raised as a :class:`CatalogError` subclass so the
    caller only has one family of exceptions to deal with. Nothing is
    retried here; retrying is the user's call.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.logger = logging.getLogger("tiliches.service")
        self.settings = Settings()
        self.base_url = base_url or self.settings.API_BASE_URL
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    @property
    def products_url(self) -> str:
        """Absolute URL of the "all products" endpoint."""
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return urljoin(base, self.settings.ALL_PRODUCTS_PATH)

    def _get_json(self, url: str) -> Any:
        """GET *url* and return the decoded JSON body."""
        try:
            resp = self.session.get(
                url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            self.logger.warning(
                "Request to %s failed: %s", url, exc, exc_info=True
            )
            raise CatalogConnectionError(
                str(exc) or f"Could not reach {url}"
            ) from exc

        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                "HTTP %d from %s", resp.status_code, url
            )
            raise CatalogHTTPError(resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            self.logger.warning(
                "Invalid JSON from %s: %s", url, exc
            )
            raise CatalogDecodeError(
                f"Invalid JSON in response: {exc}"
            ) from exc

    @staticmethod
    def _parse_products(payload: Any) -> list[Product]:
        """Decode the API's JSON array into Product objects."""
        if not isinstance(payload, list):
            raise CatalogDecodeError(
                f"Expected a JSON array, got {type(payload).__name__}"
            )
        products: list[Product] = []
        for index, item in enumerate(payload):
            try:
                products.append(Product.from_dict(item))
            except (KeyError, TypeError, ValueError) as exc:
                raise CatalogDecodeError(
                    f"Malformed product at index {index}: {exc!r}"
                ) from exc
        return products

    def get_all_products(self) -> list[Product]:
        """Return every product in API response order (blocking)."""
        url = self.products_url
        self.logger.debug("Fetching catalog from %s", url)
        products = self._parse_products(self._get_json(url))
        self.logger.info("Loaded %d products from %s", len(products), url)
        return products
