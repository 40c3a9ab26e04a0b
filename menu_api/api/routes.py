# menu_api/api/routes.py

from menu_api.api.endpoints.menu import create_menu_blueprint
from menu_api.api.endpoints.search import create_search_blueprint


def register_api(app, service, cache):
    # Register all API blueprints under /api
    app.register_blueprint(create_menu_blueprint(service, cache), url_prefix="/api")
    app.register_blueprint(create_search_blueprint(service), url_prefix="/api")
