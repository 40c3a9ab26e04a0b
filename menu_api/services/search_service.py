# menu_api/services/search_service.py
"""
Naive full-text search over the whole menu.

Walks every category in page order, fetches its items and keeps the ones whose
name or description contains the query (case-insensitive). Results are
annotated with the category name. No ranking, no dedup.
"""

from typing import List

from menu_api.models.response_models import MenuItem, SearchResult
from menu_api.services.menu_service import MenuService


def _matches(item: MenuItem, needle: str) -> bool:
    return needle in (item.name or "").lower() or needle in (item.description or "").lower()


def search_menu_items(service: MenuService, query: str) -> List[SearchResult]:
    needle = query.lower()
    results: List[SearchResult] = []

    for category in service.get_menu_categories():
        # no id, no category page to fetch
        if not category.id:
            continue
        for item in service.get_menu_items_by_category(category.id):
            if _matches(item, needle):
                results.append(SearchResult(**item.model_dump(), category=category.name))

    return results
