# tiliches/ui/product_card.py

"""Product card and thumbnail widgets."""

import logging
from collections.abc import Callable

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from tiliches.models.product import Product
from tiliches.services.image_loader import ImageLoader, LoadedImage
from tiliches.ui.formatting import (
    format_category,
    format_price,
    truncate_title,
)

logger = logging.getLogger("tiliches.ui")


class Thumbnail(Static):
    """Square image slot that keeps its placeholder until the image loads."""

    DEFAULT_CSS = """
    Thumbnail {
        width: 10;
        height: 5;
        content-align: center middle;
        text-style: dim;
    }
    Thumbnail.placeholder {
        background: $primary 10%;
    }
    """

    def __init__(
        self,
        url: str,
        loader: ImageLoader | None = None,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(
            "",
            markup=False,
            id=id,
            classes=f"placeholder {classes or ''}".strip(),
        )
        self.url = url
        self.loader = loader
        self.image: LoadedImage | None = None

    def on_mount(self) -> None:
        if self.loader is not None and self.url:
            self.run_worker(self._load_image(), group="thumbnails")

    async def _load_image(self) -> None:
        if self.loader is None:
            return
        image = await self.loader.load(self.url)
        if image is None:
            return
        self.image = image
        self.remove_class("placeholder")
        self.update(image.label)


class ProductCard(Horizontal):
    """Tappable row showing one product's thumbnail, title, category and price.

    ``on_select`` is called with no arguments once per click or Enter
    press; the owner decides what selecting a product means.
    """

    DEFAULT_CSS = """
    ProductCard {
        height: 7;
        margin: 0 1 1 1;
        padding: 0 1;
        background: $surface;
        border: round $primary;
    }
    ProductCard:focus {
        border: round $accent;
    }
    ProductCard .card_body {
        width: 1fr;
        padding: 0 1;
    }
    ProductCard .card_title {
        text-style: bold;
    }
    ProductCard .card_category {
        margin-top: 1;
        text-opacity: 60%;
    }
    ProductCard .card_price {
        width: auto;
        height: 100%;
        padding: 0 1;
        content-align: right middle;
        text-style: bold;
        color: $primary;
    }
    """

    can_focus = True

    BINDINGS = [
        Binding("enter", "select", "Open", show=False),
    ]

    def __init__(
        self,
        product: Product,
        on_select: Callable[[], None] | None = None,
        image_loader: ImageLoader | None = None,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.product = product
        self.image_loader = image_loader
        self._select_callback = on_select

    def compose(self) -> ComposeResult:
        """Build the card's thumbnail, text column and price block."""
        yield Thumbnail(
            self.product.image, self.image_loader, classes="card_thumb"
        )
        with Vertical(classes="card_body"):
            yield Static(
                truncate_title(self.product.title),
                markup=False,
                classes="card_title",
            )
            yield Static(
                format_category(self.product.category),
                markup=False,
                classes="card_category",
            )
        yield Static(
            format_price(self.product.price),
            markup=False,
            classes="card_price",
        )

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.action_select()

    def action_select(self) -> None:
        """Invoke the selection callback for this card's product."""
        logger.debug("Product %d selected", self.product.id)
        if self._select_callback is not None:
            self._select_callback()
