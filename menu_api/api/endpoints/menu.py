# menu_api/api/endpoints/menu.py

from flask import Blueprint

from menu_api.api.caching import with_cache
from menu_api.api.responses import enveloped, to_payload


def create_menu_blueprint(service, cache) -> Blueprint:
    bp = Blueprint("menu", __name__)

    @bp.route("/categories", methods=["GET"])
    @enveloped
    @with_cache("categories", cache)
    def categories():
        return to_payload(service.get_menu_categories())

    @bp.route("/categories/<category_id>/items", methods=["GET"])
    @enveloped
    @with_cache("items_by_category", cache)
    def items_by_category(category_id):
        return to_payload(service.get_menu_items_by_category(category_id))

    @bp.route("/items/<item_id>", methods=["GET"])
    @enveloped
    @with_cache("item_details", cache)
    def item_details(item_id):
        return to_payload(service.get_menu_item_details(item_id))

    @bp.route("/restaurant", methods=["GET"])
    @enveloped
    @with_cache("restaurant_info", cache)
    def restaurant_info():
        return to_payload(service.get_restaurant_info())

    @bp.route("/specials", methods=["GET"])
    @enveloped
    @with_cache("daily_specials", cache)
    def daily_specials():
        return to_payload(service.get_daily_specials())

    return bp
