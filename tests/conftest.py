import pytest

from main import create_app
from menu_api.core.cache import ResponseCache
from menu_api.core.config import Settings
from menu_api.core.errors import FetchError
from menu_api.services.menu_service import MenuService

CATEGORIES_HTML = """
<html><body>
  <div class="menu-category" data-category-id="1">
    <h2 class="category-name"> Starters </h2>
    <p class="category-description">Small plates</p>
  </div>
  <div class="menu-category" data-category-id="2">
    <h2 class="category-name">Mains</h2>
    <p class="category-description">Big plates</p>
  </div>
  <h1 class="restaurant-name">Loomis Kitchen</h1>
  <p class="restaurant-address">1 Main St</p>
  <p class="restaurant-phone">555-0100</p>
  <p class="restaurant-hours">9-5</p>
  <p class="restaurant-description">Family diner</p>
</body></html>
"""

STARTERS_HTML = """
<div class="menu-item" data-item-id="11">
  <span class="item-name">Spring Rolls</span>
  <span class="item-price">$5</span>
  <p class="item-description">Crispy veg rolls</p>
  <img class="item-image" src="/img/rolls.jpg">
</div>
<div class="menu-item" data-item-id="12">
  <span class="item-name">Soup</span>
  <span class="item-price">$4</span>
  <p class="item-description">Hot and sour</p>
</div>
"""

MAINS_HTML = """
<div class="menu-item" data-item-id="21">
  <span class="item-name">Curry</span>
  <span class="item-price">$12</span>
  <p class="item-description">Served with spring onion rice</p>
</div>
"""

ITEM_HTML = """
<h1 class="item-detail-name">Spring Rolls</h1>
<span class="item-detail-price">$5</span>
<p class="item-detail-description">Crispy veg rolls</p>
<img class="item-detail-image" src="/img/rolls.jpg">
<ul>
  <li class="ingredient-item">Cabbage</li>
  <li class="ingredient-item">Carrot</li>
</ul>
<ul><li class="allergen-item">Gluten</li></ul>
<table>
  <tr class="nutrition-item"><td class="nutrition-name">Calories</td><td class="nutrition-value">250</td></tr>
  <tr class="nutrition-item"><td class="nutrition-name">Fat</td><td class="nutrition-value">9g</td></tr>
</table>
"""

SPECIALS_HTML = """
<div class="special-item" data-item-id="99">
  <span class="special-name">Chef's Pie</span>
  <span class="special-price">$9</span>
  <p class="special-description">Only today</p>
</div>
"""


class FakeFetcher:
    """Serves canned pages keyed by path and records every call."""

    def __init__(self, pages=None, fail=False):
        self.pages = pages if pages is not None else {
            "": CATEGORIES_HTML,
            "category/1": STARTERS_HTML,
            "category/2": MAINS_HTML,
            "item/11": ITEM_HTML,
            "specials": SPECIALS_HTML,
        }
        self.fail = fail
        self.calls = []

    def fetch(self, *segments):
        path = "/".join(str(s) for s in segments)
        self.calls.append(path)
        if self.fail:
            raise FetchError(f"http://upstream.test/{path}", "connection refused")
        return self.pages.get(path, "<html></html>")


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def test_settings():
    s = Settings()
    s.RESTAURANT_URL = "http://upstream.test/"
    s.SELECTORS_FILE = None
    s.CORS_ORIGINS = ["*"]
    s.LOG_LEVEL = "WARNING"
    return s


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResponseCache(ttl_seconds=600, clock=clock)


@pytest.fixture
def service(fetcher):
    return MenuService(fetcher)


@pytest.fixture
def app(test_settings, service, cache):
    app = create_app(settings=test_settings, service=service, cache=cache)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
