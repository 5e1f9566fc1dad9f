from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from content_checker.config import GOOGLE_CSE_ENDPOINT, RESULTS_PER_CHUNK, SEARCH_TIMEOUT
from content_checker.errors import ExternalServiceError
from content_checker.logger import get_logger

logger = get_logger("web_utils")

# Google CSE refuses num > 10
GOOGLE_MAX_NUM = 10


@dataclass
class SearchResult:
    url: str
    title: str
    snippet: str


class SearchClient(ABC):
    """Something that answers a web query with candidate documents."""

    @abstractmethod
    def search(
        self,
        query: str,
        num_results: int = RESULTS_PER_CHUNK,
        timeout: Optional[float] = None,
    ) -> List[SearchResult]:
        """
        Return up to ``num_results`` hits for ``query``.

        Raises ExternalServiceError on transport failures, timeouts,
        non-success responses and unreadable bodies.
        """


# ---- Session ----
def _make_session() -> requests.Session:
    s = requests.Session()
    retries = Retry(
        total=1,
        backoff_factor=0.1,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
        respect_retry_after_header=False,
    )
    adapter = HTTPAdapter(max_retries=retries, pool_connections=10, pool_maxsize=10)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers.update({
        "Accept": "application/json",
        "User-Agent": "content-checker/1.0",
    })
    return s


# ---- Google Search ----
class GoogleSearchClient(SearchClient):
    """Google Custom Search JSON API client."""

    def __init__(
        self,
        api_key: str,
        search_engine_id: str,
        session: Optional[requests.Session] = None,
        endpoint: str = GOOGLE_CSE_ENDPOINT,
    ) -> None:
        self.api_key = api_key
        self.search_engine_id = search_engine_id
        self.session = session or _make_session()
        self.endpoint = endpoint

    def search(
        self,
        query: str,
        num_results: int = RESULTS_PER_CHUNK,
        timeout: Optional[float] = None,
    ) -> List[SearchResult]:
        num = max(1, min(num_results, GOOGLE_MAX_NUM))
        params = {"key": self.api_key, "cx": self.search_engine_id, "q": query, "num": num}
        try:
            r = self.session.get(self.endpoint, params=params, timeout=timeout or SEARCH_TIMEOUT)
        except requests.RequestException as e:
            raise ExternalServiceError(f"Google CSE request failed: {e}") from e

        if not r.ok:
            raise ExternalServiceError(f"Google CSE error: {r.status_code} - {r.text[:200]}")

        try:
            data = r.json()
        except ValueError as e:
            raise ExternalServiceError("Google CSE returned an invalid JSON body") from e

        if not isinstance(data, dict):
            raise ExternalServiceError("Google CSE returned an unexpected response body")
        items = data.get("items", []) or []
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise ExternalServiceError("Google CSE returned malformed search items")
        out = [
            SearchResult(
                url=i.get("link", "") or "",
                title=i.get("title", "") or "",
                snippet=i.get("snippet", "") or "",
            )
            for i in items
        ]
        logger.info(f"google_search: got {len(out)} items for '{query[:60]}'")
        return out
