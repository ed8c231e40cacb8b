# tiliches/ui/home_screen.py

"""Home screen: the product catalog list."""

import logging
from collections.abc import Callable
from functools import partial

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    Button,
    ContentSwitcher,
    Footer,
    Header,
    LoadingIndicator,
    Static,
)

from tiliches.models.catalog_state import CatalogState, HomeView, resolve_view
from tiliches.models.product import Product
from tiliches.services.catalog_loader import CatalogLoader
from tiliches.services.image_loader import ImageLoader
from tiliches.ui.product_card import ProductCard

logger = logging.getLogger("tiliches.ui")


class HomeScreen(Screen[None]):
    """Loads the catalog on mount and shows one of four panes.

    The pane is chosen from the loader's state snapshot by
    :func:`resolve_view`; the loader pushes every new snapshot to
    :meth:`render_state`.
    """

    BINDINGS = [
        Binding("r", "reload", "Reload"),
    ]

    def __init__(
        self,
        loader: CatalogLoader | None = None,
        navigate: Callable[[int], None] | None = None,
        image_loader: ImageLoader | None = None,
    ) -> None:
        super().__init__()
        self.loader = loader if loader is not None else CatalogLoader()
        self.loader.on_change = self.render_state
        self.navigate = navigate
        self.image_loader = image_loader
        self.current_view: HomeView = resolve_view(self.loader.state)

    def compose(self) -> ComposeResult:
        """Build the header, the four state panes and the footer."""
        yield Header()
        with ContentSwitcher(
            initial=HomeView.LOADING.value, id="home_switcher"
        ):
            with Vertical(id=HomeView.LOADING.value, classes="pane"):
                yield LoadingIndicator(id="loader")
            with Vertical(id=HomeView.ERROR.value, classes="pane"):
                yield Static("Failed to load products", id="error_title")
                yield Static("", id="error_message", markup=False)
                yield Button("Retry", variant="primary", id="retry_btn")
            with Vertical(id=HomeView.EMPTY.value, classes="pane"):
                yield Static("No products available", id="empty_title")
                yield Button("Reload", variant="primary", id="reload_btn")
            yield VerticalScroll(id=HomeView.LOADED.value)
        yield Footer()

    def on_mount(self) -> None:
        """Show the current state and kick off the first fetch."""
        self.render_state(self.loader.state)
        self.reload()

    def reload(self) -> None:
        """Start a catalog fetch without blocking the screen."""
        self.run_worker(self.loader.load_products(), group="catalog")

    def render_state(self, state: CatalogState) -> None:
        """Switch to the pane matching *state*."""
        view = resolve_view(state)
        if view is HomeView.ERROR:
            self.query_one("#error_message", Static).update(
                state.error_message or ""
            )
        elif view is HomeView.LOADED:
            self.run_worker(
                self._rebuild_list(state.products),
                group="product_list",
                exclusive=True,
            )
        self.query_one("#home_switcher", ContentSwitcher).current = view.value
        if view is not self.current_view:
            logger.debug("Home view %s -> %s", self.current_view.value, view.value)
        self.current_view = view

    async def _rebuild_list(self, products: tuple[Product, ...]) -> None:
        """Replace every card in the list, keeping response order."""
        product_list = self.query_one(
            f"#{HomeView.LOADED.value}", VerticalScroll
        )
        await product_list.remove_children()
        await product_list.mount_all(
            ProductCard(
                product,
                on_select=partial(self._select_product, product.id),
                image_loader=self.image_loader,
                id=f"product_{product.id}",
            )
            for product in products
        )
        product_list.scroll_home(animate=False)

    def _select_product(self, product_id: int) -> None:
        if self.navigate is None:
            logger.warning(
                "Product %d selected but no navigation is wired", product_id
            )
            return
        self.navigate(product_id)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Retry (error pane) and Reload (empty pane) both refetch."""
        if event.button.id in ("retry_btn", "reload_btn"):
            self.reload()

    def action_reload(self) -> None:
        """Refetch the catalog."""
        self.reload()
