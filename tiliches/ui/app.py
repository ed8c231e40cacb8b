# tiliches/ui/app.py

"""Terminal UI for the Tiliches product catalog."""

import logging

from textual.app import App
from textual.binding import Binding

from tiliches.config.settings import Settings
from tiliches.services.catalog_loader import CatalogLoader
from tiliches.services.image_loader import ImageLoader
from tiliches.services.product_service import ProductService
from tiliches.ui.detail_screen import ProductDetailScreen
from tiliches.ui.home_screen import HomeScreen

logger = logging.getLogger("tiliches.ui")


class TilichesApp(App[None]):
    """Hosts the catalog home screen and the product detail screen."""

    CSS_PATH = "styles.css"
    TITLE = Settings.APP_TITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        service: ProductService | None = None,
        image_loader: ImageLoader | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.loader = CatalogLoader(service=service)
        self.image_loader = (
            image_loader if image_loader is not None else ImageLoader()
        )

    def on_mount(self) -> None:
        """Open the home screen; it starts the first catalog fetch."""
        self.push_screen(
            HomeScreen(
                self.loader,
                navigate=self.show_product,
                image_loader=self.image_loader,
            )
        )

    def show_product(self, product_id: int) -> None:
        """Navigate to the detail screen for *product_id*."""
        product = next(
            (p for p in self.loader.state.products if p.id == product_id),
            None,
        )
        if product is None:
            logger.warning("Product %d is not in the loaded catalog", product_id)
            self.notify(
                f"Product {product_id} is no longer available",
                severity="warning",
            )
            return
        logger.info("Opening product %d", product_id)
        self.push_screen(
            ProductDetailScreen(product, image_loader=self.image_loader)
        )
