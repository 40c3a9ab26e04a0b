# menu_api/services/fetcher.py
"""
Fetches raw HTML from the restaurant website.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from menu_api.core.errors import FetchError

logger = logging.getLogger(__name__)


def build_url(base_url: str, *segments: str) -> str:
    """
    Append path segments to the base origin.

    Each segment is percent-encoded as a whole, so a caller-supplied id like
    "../admin" or "1?x=2" stays inside its own segment.
    """
    if not segments:
        return base_url

    encoded = []
    for seg in segments:
        seg = quote(str(seg), safe="")
        # "." and ".." survive quote() and would be collapsed by the server
        if seg in (".", ".."):
            seg = seg.replace(".", "%2E")
        encoded.append(seg)

    return base_url.rstrip("/") + "/" + "/".join(encoded)


class WebsiteFetcher:
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def fetch(self, *segments: str) -> str:
        url = build_url(self.base_url, *segments)
        logger.debug("GET %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        # requests falls back to latin-1 for text/html without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text
