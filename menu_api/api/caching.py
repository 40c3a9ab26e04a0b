# menu_api/api/caching.py
import logging
from functools import wraps

from menu_api.core.cache import make_cache_key

logger = logging.getLogger(__name__)


def with_cache(route_name: str, cache):
    """
    Memoize a route handler's payload, keyed by route name + path params.

    Only returned payloads are stored; a handler that raises leaves the
    cache untouched.
    """

    def decorator(handler):
        @wraps(handler)
        def wrapper(**params):
            key = make_cache_key(route_name, params)
            cached = cache.get(key)
            if cached is not None:
                logger.debug("cache hit %s", key)
                return cached

            payload = handler(**params)
            cache.set(key, payload)
            return payload

        return wrapper

    return decorator
