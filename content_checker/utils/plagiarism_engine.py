"""
Plagiarism check over web search snippets.

The text is cut into a handful of sentence-aligned chunks, each chunk is
searched as an exact phrase, and every returned snippet is compared with the
chunk by Jaccard similarity of their word sets. The overall score is the mean
of the per-chunk best similarities.
"""
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from content_checker.config import (
    CHUNK_PREVIEW_LENGTH,
    HIGH_SIMILARITY_SCORE,
    MAX_REPORTED_MATCHES,
    MAX_TEXT_LENGTH,
    POLITENESS_DELAY,
    RELEVANCE_FLOOR,
    REQUEST_TIMEOUT,
    RESULTS_PER_CHUNK,
    SEARCH_TIMEOUT,
    SOME_SIMILARITY_SCORE,
)
from content_checker.errors import ExternalServiceError, InputValidationError
from content_checker.logger import get_logger
from content_checker.utils.text_utils import (
    build_search_query,
    jaccard_similarity,
    split_into_chunks,
    tokenize,
)
from content_checker.utils.web_utils import SearchClient, SearchResult

logger = get_logger("plagiarism_engine")


@dataclass
class CandidateMatch:
    chunk_index: int
    chunk_text: str
    url: str
    title: str
    snippet: str
    similarity: float


@dataclass
class ChunkOutcome:
    index: int
    score: float = 0.0
    matches: List[CandidateMatch] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class PlagiarismResult:
    plagiarism_score: float
    matches: List[CandidateMatch]
    chunk_count: int = 0
    failed_chunks: int = 0


def validate_text(text: Any, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Reject missing or blank text; cut oversized text down to ``max_length``."""
    if not text or not isinstance(text, str):
        raise InputValidationError("Text is required and must be a string")
    if not text.strip():
        raise InputValidationError("Text cannot be empty")
    return text[:max_length]


def score_chunk(
    index: int,
    chunk: str,
    results: List[SearchResult],
    relevance_floor: float = RELEVANCE_FLOOR,
    preview_length: int = CHUNK_PREVIEW_LENGTH,
) -> ChunkOutcome:
    """Compare a chunk against its search hits; only hits above the floor count."""
    chunk_tokens = tokenize(chunk)
    outcome = ChunkOutcome(index=index)
    for item in results:
        similarity = jaccard_similarity(chunk_tokens, tokenize(item.snippet))
        if similarity <= relevance_floor:
            continue
        outcome.matches.append(CandidateMatch(
            chunk_index=index,
            chunk_text=chunk[:preview_length],
            url=item.url,
            title=item.title,
            snippet=item.snippet,
            similarity=round(similarity, 2),
        ))
        outcome.score = max(outcome.score, similarity)
    return outcome


def aggregate(outcomes: List[ChunkOutcome], max_matches: int = MAX_REPORTED_MATCHES) -> PlagiarismResult:
    scores = [o.score for o in outcomes]
    overall = sum(scores) / len(scores) if scores else 0.0
    all_matches = [m for o in outcomes for m in o.matches]
    all_matches.sort(key=lambda m: m.similarity, reverse=True)
    return PlagiarismResult(
        plagiarism_score=round(overall, 2),
        matches=all_matches[:max_matches],
        chunk_count=len(outcomes),
        failed_chunks=sum(1 for o in outcomes if o.error),
    )


def similarity_verdict(score: float) -> str:
    if score >= HIGH_SIMILARITY_SCORE:
        return "High Similarity Found"
    if score >= SOME_SIMILARITY_SCORE:
        return "Some Similarity Found"
    return "Low Similarity"


def check_plagiarism(
    text: Any,
    search_client_factory: Callable[[], SearchClient],
    results_per_chunk: int = RESULTS_PER_CHUNK,
    delay: float = POLITENESS_DELAY,
    search_timeout: float = SEARCH_TIMEOUT,
    request_timeout: float = REQUEST_TIMEOUT,
) -> PlagiarismResult:
    """
    Run the full check: validate, chunk, search each chunk in turn, aggregate.

    The search client is only built once the input is known to be valid, so a
    bad request never reaches the search API. A failed search scores its
    chunk as 0 and the rest of the chunks are still processed. Once
    ``request_timeout`` seconds have elapsed, remaining chunks are skipped
    and also score 0.
    """
    limited_text = validate_text(text)
    logger.info(f"Processing text of length: {len(limited_text)} characters")

    search_client = search_client_factory()

    chunks = split_into_chunks(limited_text)
    logger.info(f"Split text into {len(chunks)} chunks")
    if not chunks:
        return PlagiarismResult(plagiarism_score=0.0, matches=[])

    deadline = time.monotonic() + request_timeout
    outcomes: List[ChunkOutcome] = []

    for index, chunk in enumerate(chunks):
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            logger.warning(f"⏱️ Request timeout reached, skipping chunk {index + 1}/{len(chunks)}")
            outcomes.append(ChunkOutcome(index=index, error="timeout"))
            continue

        logger.info(f"Processing chunk {index + 1}/{len(chunks)}: '{chunk[:50]}...'")
        query = build_search_query(chunk)
        try:
            results = search_client.search(
                query,
                num_results=results_per_chunk,
                timeout=min(search_timeout, remaining),
            )
        except ExternalServiceError as e:
            logger.warning(f"Search failed for chunk {index}: {e}")
            outcomes.append(ChunkOutcome(index=index, error=str(e)))
        except Exception as e:
            logger.exception(f"Unexpected error searching chunk {index}: {e}")
            outcomes.append(ChunkOutcome(index=index, error=str(e) or type(e).__name__))
        else:
            outcome = score_chunk(index, chunk, results)
            logger.info(f"Chunk {index + 1} max similarity: {outcome.score:.3f}")
            outcomes.append(outcome)

        if index < len(chunks) - 1:
            pause = min(delay, deadline - time.monotonic())
            if pause > 0:
                time.sleep(pause)

    result = aggregate(outcomes)
    logger.info(
        f"✅ Overall plagiarism score: {result.plagiarism_score:.2f}, "
        f"matches: {len(result.matches)}, failed chunks: {result.failed_chunks}"
    )
    return result
