# tiliches/models/catalog_state.py

"""Presentation state of the home screen."""

from dataclasses import dataclass
from enum import Enum

from tiliches.models.product import Product


class HomeView(str, Enum):
    """Mutually exclusive render branches of the home screen.

    Values double as the widget ids of the matching ContentSwitcher panes.
    """

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True)
class CatalogState:
    """Immutable snapshot; every transition publishes a new instance."""

    products: tuple[Product, ...] = ()
    loading: bool = True
    error_message: str | None = None


def resolve_view(state: CatalogState) -> HomeView:
    """Pick the single branch that governs what the screen shows."""
    if state.loading:
        return HomeView.LOADING
    if state.error_message is not None:
        return HomeView.ERROR
    if not state.products:
        return HomeView.EMPTY
    return HomeView.LOADED
