# menu_api/services/html_extractor.py
"""
Pulls menu records out of the restaurant website's HTML.

Every function is tolerant of missing markup: a node that isn't there gives
an empty string, an empty list or None for that field, never an exception.
Lists come back in document order.
"""

from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from menu_api.core.errors import ParseError
from menu_api.models.response_models import (
    Category,
    ItemDetail,
    MenuItem,
    RestaurantInfo,
    Special,
)
from menu_api.services.selectors import DEFAULT_SELECTORS, Selectors


def parse_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html or "", "html.parser")
    except Exception as e:
        raise ParseError(f"Could not parse HTML: {e}") from e


def _text(node: Tag, selector: str) -> str:
    # every match contributes, joined as-is, then trimmed once
    return "".join(el.get_text() for el in node.select(selector)).strip()


def _attr(node: Tag, selector: str, attr: str) -> Optional[str]:
    el = node.select_one(selector)
    if el is None:
        return None
    return _own_attr(el, attr)


def _own_attr(el: Tag, attr: str) -> Optional[str]:
    value = el.get(attr)
    # multi-valued attributes (class, rel...) come back as lists
    if isinstance(value, list):
        value = " ".join(value)
    return value


def _texts(node: Tag, selector: str) -> List[str]:
    return [el.get_text().strip() for el in node.select(selector)]


def extract_categories(doc: BeautifulSoup, selectors: Selectors = DEFAULT_SELECTORS) -> List[Category]:
    sel = selectors["categories"]
    return [
        Category(
            id=_own_attr(el, sel["id_attr"]),
            name=_text(el, sel["name"]),
            description=_text(el, sel["description"]),
        )
        for el in doc.select(sel["container"])
    ]


def extract_items(doc: BeautifulSoup, selectors: Selectors = DEFAULT_SELECTORS) -> List[MenuItem]:
    sel = selectors["items"]
    return [
        MenuItem(
            id=_own_attr(el, sel["id_attr"]),
            name=_text(el, sel["name"]),
            price=_text(el, sel["price"]),
            description=_text(el, sel["description"]),
            image=_attr(el, sel["image"], sel["image_attr"]),
        )
        for el in doc.select(sel["container"])
    ]


def extract_item_detail(
    doc: BeautifulSoup,
    item_id: Optional[str] = None,
    selectors: Selectors = DEFAULT_SELECTORS,
) -> ItemDetail:
    sel = selectors["item_detail"]

    nutrition: Dict[str, str] = {}
    for el in doc.select(sel["nutrition"]):
        # later duplicates win, same as assigning into a dict in page order
        nutrition[_text(el, sel["nutrition_name"])] = _text(el, sel["nutrition_value"])

    return ItemDetail(
        id=item_id,
        name=_text(doc, sel["name"]),
        price=_text(doc, sel["price"]),
        description=_text(doc, sel["description"]),
        image=_attr(doc, sel["image"], sel["image_attr"]),
        ingredients=_texts(doc, sel["ingredient"]),
        allergens=_texts(doc, sel["allergen"]),
        nutritional_info=nutrition,
    )


def extract_restaurant_info(doc: BeautifulSoup, selectors: Selectors = DEFAULT_SELECTORS) -> RestaurantInfo:
    sel = selectors["restaurant"]
    return RestaurantInfo(
        name=_text(doc, sel["name"]),
        address=_text(doc, sel["address"]),
        phone=_text(doc, sel["phone"]),
        hours=_text(doc, sel["hours"]),
        description=_text(doc, sel["description"]),
    )


def extract_specials(doc: BeautifulSoup, selectors: Selectors = DEFAULT_SELECTORS) -> List[Special]:
    sel = selectors["specials"]
    return [
        Special(
            id=_own_attr(el, sel["id_attr"]),
            name=_text(el, sel["name"]),
            price=_text(el, sel["price"]),
            description=_text(el, sel["description"]),
        )
        for el in doc.select(sel["container"])
    ]
