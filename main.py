import logging

from flask import Flask, jsonify
from flask_cors import CORS

from menu_api.api.middleware import register_middleware
from menu_api.api.routes import register_api
from menu_api.core.cache import ResponseCache
from menu_api.core.config import settings as default_settings
from menu_api.core.logging_config import configure_logging
from menu_api.services.fetcher import WebsiteFetcher
from menu_api.services.menu_service import MenuService
from menu_api.services.selectors import load_selectors

logger = logging.getLogger(__name__)


def create_app(settings=None, service=None, cache=None):
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    if service is None:
        fetcher = WebsiteFetcher(
            settings.RESTAURANT_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            user_agent=settings.USER_AGENT,
        )
        service = MenuService(fetcher, load_selectors(settings.SELECTORS_FILE))

    if cache is None:
        cache = ResponseCache(ttl_seconds=settings.CACHE_TTL_SECONDS)

    app = Flask(__name__)
    app.json.sort_keys = False

    # "*" must go out literally, not as the echoed request Origin
    CORS(
        app,
        resources={r"/*": {"origins": settings.CORS_ORIGINS}},
        send_wildcard=settings.CORS_ORIGINS == ["*"],
    )
    register_middleware(app)

    # register all blueprints
    register_api(app, service, cache)

    @app.route("/")
    def index():
        return jsonify({"message": "Restaurant Menu API is running"}), 200

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    logger.info("Server running on port %s", default_settings.PORT)
    app.run(host=default_settings.HOST, port=default_settings.PORT, debug=default_settings.DEBUG)
