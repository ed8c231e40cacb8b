# tests/test_catalog_state.py

"""Tests for home screen view resolution."""

import unittest

from tiliches.models.catalog_state import CatalogState, HomeView, resolve_view
from tiliches.models.product import Product

_PRODUCT = Product(
    id=1,
    title="Backpack",
    price=109.95,
    category="men's clothing",
    image="https://fakestoreapi.com/img/1.jpg",
)


class TestResolveView(unittest.TestCase):
    """Exactly one branch is active for every state."""

    def test_initial_state_is_loading(self) -> None:
        self.assertEqual(resolve_view(CatalogState()), HomeView.LOADING)

    def test_loading_wins_over_stale_products(self) -> None:
        state = CatalogState(products=(_PRODUCT,), loading=True)
        self.assertEqual(resolve_view(state), HomeView.LOADING)

    def test_error(self) -> None:
        state = CatalogState(loading=False, error_message="HTTP error 500")
        self.assertEqual(resolve_view(state), HomeView.ERROR)

    def test_empty_error_message_still_error(self) -> None:
        """Only None means "no error"."""
        state = CatalogState(loading=False, error_message="")
        self.assertEqual(resolve_view(state), HomeView.ERROR)

    def test_empty(self) -> None:
        state = CatalogState(products=(), loading=False)
        self.assertEqual(resolve_view(state), HomeView.EMPTY)

    def test_loaded(self) -> None:
        state = CatalogState(products=(_PRODUCT,), loading=False)
        self.assertEqual(resolve_view(state), HomeView.LOADED)

    def test_view_values_are_pane_ids(self) -> None:
        self.assertEqual(
            [v.value for v in HomeView],
            ["loading", "error", "empty", "loaded"],
        )


if __name__ == "__main__":
    unittest.main()
