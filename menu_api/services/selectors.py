# menu_api/services/selectors.py
"""
CSS selectors describing the upstream website's markup.

The restaurant site is owned by somebody else and its markup can change at
any time, so every selector lives in one mapping (view -> field -> selector)
that a JSON file can override field by field:

    {"items": {"container": ".dish", "name": ".dish-title"}}

Fields ending in ``_attr`` are attribute names, not selectors.
"""

import copy
import json
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

Selectors = Dict[str, Dict[str, str]]

DEFAULT_SELECTORS: Selectors = {
    "categories": {
        "container": ".menu-category",
        "id_attr": "data-category-id",
        "name": ".category-name",
        "description": ".category-description",
    },
    "items": {
        "container": ".menu-item",
        "id_attr": "data-item-id",
        "name": ".item-name",
        "price": ".item-price",
        "description": ".item-description",
        "image": ".item-image",
        "image_attr": "src",
    },
    "item_detail": {
        "name": ".item-detail-name",
        "price": ".item-detail-price",
        "description": ".item-detail-description",
        "image": ".item-detail-image",
        "image_attr": "src",
        "ingredient": ".ingredient-item",
        "allergen": ".allergen-item",
        "nutrition": ".nutrition-item",
        "nutrition_name": ".nutrition-name",
        "nutrition_value": ".nutrition-value",
    },
    "restaurant": {
        "name": ".restaurant-name",
        "address": ".restaurant-address",
        "phone": ".restaurant-phone",
        "hours": ".restaurant-hours",
        "description": ".restaurant-description",
    },
    "specials": {
        "container": ".special-item",
        "id_attr": "data-item-id",
        "name": ".special-name",
        "price": ".special-price",
        "description": ".special-description",
    },
}


def merge_selectors(overrides: Optional[dict], base: Optional[Selectors] = None) -> Selectors:
    merged = copy.deepcopy(base or DEFAULT_SELECTORS)

    for view, fields in (overrides or {}).items():
        if view not in merged:
            logger.warning("Ignoring selector overrides for unknown view %r", view)
            continue
        if not isinstance(fields, dict):
            raise ValueError(f"Selector overrides for {view!r} must be an object")

        for field, selector in fields.items():
            if field not in merged[view]:
                logger.warning("Ignoring unknown selector field %s.%s", view, field)
                continue
            if not isinstance(selector, str) or not selector.strip():
                raise ValueError(f"Selector {view}.{field} must be a non-empty string")
            merged[view][field] = selector

    return merged


def load_selectors(path: Optional[str] = None) -> Selectors:
    """Default selectors, with the overrides from ``path`` applied if given."""
    if not path:
        return merge_selectors(None)

    with open(path, "r", encoding="utf-8") as f:
        overrides = json.load(f)

    logger.info("Loaded selector overrides from %s", path)
    return merge_selectors(overrides)
