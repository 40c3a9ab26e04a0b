# menu_api/core/cache.py
"""
Process-level response cache.

Entries expire a fixed number of seconds after they are written. Expiry is
lazy: stale entries are dropped when read, and swept whenever a new entry
is written. There is no size bound and nothing survives a restart.
"""

import json
import time
from typing import Any, Callable, Dict, Optional, Tuple

DEFAULT_TTL_SECONDS = 600


def make_cache_key(route_name: str, params: Optional[Dict[str, Any]] = None) -> str:
    return f"{route_name}_{json.dumps(params or {}, sort_keys=True)}"


class ResponseCache:
    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self._ttl = ttl_seconds
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() > expires_at:
            self._entries.pop(key, None)
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        now = self._clock()
        self._purge_expired(now)
        self._entries[key] = (value, now + self._ttl)

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, (_, expires_at) in self._entries.items() if now > expires_at]
        for k in expired:
            del self._entries[k]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class NullCache:
    """Cache that never remembers anything."""

    def get(self, key: str) -> Optional[Any]:
        return None

    def set(self, key: str, value: Any) -> None:
        pass

    def clear(self) -> None:
        pass

    def __len__(self) -> int:
        return 0
