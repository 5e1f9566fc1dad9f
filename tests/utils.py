from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List, Optional, Union

from huggingface_hub.utils import HfHubHTTPError

from content_checker.utils.web_utils import SearchClient, SearchResult


def word_block(prefix: str, count: int = 25) -> str:
    """Sentence of ``count`` distinct tokens like ``alpha00 alpha01 ...`` (~200 chars)."""
    return " ".join(f"{prefix}{i:02d}" for i in range(count))


def three_chunk_text() -> str:
    """Three long sentences; each one becomes its own chunk."""
    return ". ".join(word_block(p) for p in ("alpha", "bravo", "charlie")) + "."


def half_overlap_snippet(prefix: str) -> str:
    """Snippet sharing all 25 tokens of ``word_block(prefix)`` plus 25 unrelated ones."""
    return word_block(prefix) + " " + word_block("zulu")


class FakeSearchClient(SearchClient):
    """Returns queued responses in call order; exceptions in the queue are raised."""

    def __init__(self, responses: List[Union[List[SearchResult], Exception]]):
        self._responses = list(responses)
        self.queries: List[str] = []
        self.timeouts: List[Optional[float]] = []

    def search(self, query, num_results=3, timeout=None):
        self.queries.append(query)
        self.timeouts.append(timeout)
        response = self._responses[len(self.queries) - 1] if len(self.queries) <= len(self._responses) else []
        if isinstance(response, Exception):
            raise response
        return response


class FakeClassifier:
    def __init__(self, result: Any = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[dict] = []

    def text_classification(self, text, model=None):
        self.calls.append({"text": text, "model": model})
        if self.error is not None:
            raise self.error
        return self.result


def hf_http_error(status: int):
    """HfHubHTTPError carrying only a response status, as raised by the inference client."""
    err = HfHubHTTPError.__new__(HfHubHTTPError)
    err.response = SimpleNamespace(status_code=status)
    return err
