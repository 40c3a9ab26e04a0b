# menu_api/services/menu_service.py
"""
Menu operations backed by the restaurant website.

Each operation fetches one page, parses it and runs the matching extractor.
Whatever goes wrong underneath is logged with its traceback and replaced by a
ServiceError naming what we were trying to fetch.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from menu_api.core.errors import ServiceError
from menu_api.models.response_models import (
    Category,
    ItemDetail,
    MenuItem,
    RestaurantInfo,
    Special,
)
from menu_api.services import html_extractor
from menu_api.services.fetcher import WebsiteFetcher
from menu_api.services.selectors import Selectors, load_selectors

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MenuService:
    def __init__(self, fetcher: WebsiteFetcher, selectors: Optional[Selectors] = None):
        self.fetcher = fetcher
        self.selectors = selectors or load_selectors()

    def _scrape(self, subject: str, segments: tuple, extract: Callable[..., T]) -> T:
        try:
            html = self.fetcher.fetch(*segments)
            doc = html_extractor.parse_html(html)
            return extract(doc)
        except Exception:
            logger.exception("Error fetching %s (path=%r)", subject, "/".join(segments))
            raise ServiceError(f"Failed to fetch {subject}") from None

    def get_menu_categories(self) -> List[Category]:
        return self._scrape(
            "menu categories",
            (),
            lambda doc: html_extractor.extract_categories(doc, self.selectors),
        )

    def get_menu_items_by_category(self, category_id: str) -> List[MenuItem]:
        return self._scrape(
            "menu items",
            ("category", category_id),
            lambda doc: html_extractor.extract_items(doc, self.selectors),
        )

    def get_menu_item_details(self, item_id: str) -> ItemDetail:
        return self._scrape(
            "item details",
            ("item", item_id),
            lambda doc: html_extractor.extract_item_detail(doc, item_id, self.selectors),
        )

    def get_restaurant_info(self) -> RestaurantInfo:
        return self._scrape(
            "restaurant information",
            (),
            lambda doc: html_extractor.extract_restaurant_info(doc, self.selectors),
        )

    def get_daily_specials(self) -> List[Special]:
        return self._scrape(
            "daily specials",
            ("specials",),
            lambda doc: html_extractor.extract_specials(doc, self.selectors),
        )
