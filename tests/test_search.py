import pytest

from main import create_app
from menu_api.core.cache import NullCache
from menu_api.services.search_service import search_menu_items


class CountingService:
    def __init__(self):
        self.calls = 0

    def get_menu_categories(self):
        self.calls += 1
        return []


def test_search_spring_rolls_end_to_end(client):
    resp = client.get("/api/search?query=spring")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"][0]["name"] == "Spring Rolls"
    assert body["data"][0]["category"] == "Starters"


def test_search_spans_categories_in_order(client):
    data = client.get("/api/search?query=SPRING").get_json()["data"]

    assert [(d["name"], d["category"]) for d in data] == [
        ("Spring Rolls", "Starters"),
        ("Curry", "Mains"),
    ]


def test_search_matches_description(client):
    data = client.get("/api/search?query=sour").get_json()["data"]

    assert [d["name"] for d in data] == ["Soup"]


def test_search_without_matches(client):
    assert client.get("/api/search?query=pizza").get_json() == {"success": True, "data": []}


def test_search_is_not_cached(client, fetcher):
    client.get("/api/search?query=soup")
    client.get("/api/search?query=soup")

    assert fetcher.calls.count("") == 2


@pytest.mark.parametrize("url", ["/api/search", "/api/search?query="])
def test_search_requires_query(test_settings, url):
    service = CountingService()
    client = create_app(settings=test_settings, service=service, cache=NullCache()).test_client()

    resp = client.get(url)

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": "Search query is required"}
    assert service.calls == 0


def test_search_upstream_failure(client, fetcher):
    fetcher.fail = True

    resp = client.get("/api/search?query=soup")

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "error": "Failed to fetch menu categories"}


def test_search_skips_categories_without_id(service, fetcher):
    fetcher.pages[""] = '<div class="menu-category"><h2 class="category-name">Drinks</h2></div>'

    assert search_menu_items(service, "tea") == []
    assert fetcher.calls == [""]
