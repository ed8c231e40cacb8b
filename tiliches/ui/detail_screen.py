# tiliches/ui/detail_screen.py

"""Product detail screen reached by selecting a card."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from tiliches.models.product import Product
from tiliches.services.image_loader import ImageLoader
from tiliches.ui.formatting import format_category, format_price, format_rating
from tiliches.ui.product_card import Thumbnail


class ProductDetailScreen(Screen[None]):
    """Full view of one product, including description and rating."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
    ]

    def __init__(
        self,
        product: Product,
        image_loader: ImageLoader | None = None,
    ) -> None:
        super().__init__()
        self.product = product
        self.image_loader = image_loader

    def compose(self) -> ComposeResult:
        p = self.product
        yield Header()
        with VerticalScroll(id="detail"):
            with Horizontal(id="detail_header"):
                yield Thumbnail(p.image, self.image_loader, id="detail_thumb")
                with Vertical(id="detail_summary"):
                    yield Static(p.title, markup=False, id="detail_title")
                    yield Static(
                        format_category(p.category),
                        markup=False,
                        id="detail_category",
                    )
                    yield Static(format_price(p.price), id="detail_price")
                    yield Static(
                        format_rating(p.rating.rate, p.rating.count),
                        id="detail_rating",
                    )
            yield Static(
                p.description, markup=False, id="detail_description"
            )
        yield Footer()
