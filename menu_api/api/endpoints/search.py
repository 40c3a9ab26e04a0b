# menu_api/api/endpoints/search.py

from flask import Blueprint, request
from pydantic import ValidationError as PydanticValidationError

from menu_api.api.responses import enveloped, to_payload
from menu_api.core.errors import ValidationError
from menu_api.models.request_models import SearchRequest
from menu_api.services.search_service import search_menu_items


def create_search_blueprint(service) -> Blueprint:
    bp = Blueprint("search", __name__)

    @bp.route("/search", methods=["GET"])
    @enveloped
    def search():
        try:
            req = SearchRequest(query=request.args.get("query", ""))
        except PydanticValidationError:
            raise ValidationError("Search query is required") from None

        return to_payload(search_menu_items(service, req.query))

    return bp
