# tiliches/services/exceptions.py

"""Errors raised while fetching the product catalog."""


class CatalogError(Exception):
    """Base class for every catalog fetch failure."""


class CatalogConnectionError(CatalogError):
    """The request never produced a response (DNS, TLS, timeout...)."""


class CatalogHTTPError(CatalogError):
    """The API answered with a non-2xx status code."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.message = message or f"HTTP error {status_code}"
        super().__init__(self.message)


class CatalogDecodeError(CatalogError):
    """The response body could not be decoded into products."""
