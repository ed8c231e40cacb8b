# tiliches/services/catalog_loader.py

"""Loads the catalog and owns the home screen's presentation state."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace

from tiliches.config.settings import Settings
from tiliches.models.catalog_state import CatalogState
from tiliches.services.product_service import ProductService

logger = logging.getLogger("tiliches.loader")

StateListener = Callable[[CatalogState], None]


class CatalogLoader:
    """Runs catalog fetches and publishes each resulting state snapshot.

    Overlapping calls to :meth:`load_products` are ordered by a request
    sequence number: only the most recently started fetch may publish its
    outcome, older completions are dropped.
    """

    def __init__(
        self,
        service: ProductService | None = None,
        on_change: StateListener | None = None,
    ) -> None:
        self.service = service if service is not None else ProductService()
        self.on_change = on_change
        self.state = CatalogState()
        self._latest_request = 0

    @property
    def latest_request(self) -> int:
        """Sequence number of the most recently started fetch."""
        return self._latest_request

    def _publish(self, state: CatalogState) -> None:
        self.state = state
        if self.on_change is not None:
            self.on_change(state)

    def _is_stale(self, request_id: int) -> bool:
        return request_id != self._latest_request

    async def load_products(self) -> bool:
        """Fetch every product and publish the outcome.

        Returns ``True`` when this call's products were published and
        ``False`` on failure or when a newer fetch superseded it.
        """
        self._latest_request += 1
        request_id = self._latest_request
        self._publish(replace(self.state, loading=True, error_message=None))
        logger.debug("Catalog fetch #%d started", request_id)

        try:
            products = await asyncio.to_thread(self.service.get_all_products)
        except Exception as exc:
            if self._is_stale(request_id):
                logger.info(
                    "Dropping failed catalog fetch #%d, superseded by #%d",
                    request_id,
                    self._latest_request,
                )
                return False
            logger.error(
                "Catalog fetch #%d failed: %s", request_id, exc, exc_info=True
            )
            self._publish(
                CatalogState(
                    products=(),
                    loading=False,
                    error_message=str(exc) or Settings.GENERIC_ERROR_MESSAGE,
                )
            )
            return False

        if self._is_stale(request_id):
            logger.info(
                "Dropping catalog fetch #%d (%d products), superseded by #%d",
                request_id,
                len(products),
                self._latest_request,
            )
            return False

        logger.info(
            "Catalog fetch #%d loaded %d products", request_id, len(products)
        )
        self._publish(
            CatalogState(products=tuple(products), loading=False)
        )
        return True
