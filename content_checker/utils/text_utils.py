import re
from typing import List, Set

from content_checker.config import (
    CHUNK_SIZE,
    MAX_CHUNKS,
    MIN_CHUNK_LENGTH,
    MIN_SENTENCE_LENGTH,
    QUERY_MAX_LENGTH,
)

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_QUOTES_RE = re.compile(r"[\"“”]")


def tokenize(text: str) -> Set[str]:
    """Lower-cased word tokens longer than two characters, punctuation stripped."""
    if not text:
        return set()
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return {tok for tok in cleaned.split() if len(tok) > 2}


def jaccard_similarity(a: Set[str], b: Set[str]) -> float:
    if not a and not b:
        return 0.0
    inter = len(a & b)
    union = len(a | b)
    return inter / union


def normalize_text(text: str) -> str:
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def split_into_sentences(norm_text: str, min_length: int = MIN_SENTENCE_LENGTH) -> List[str]:
    """Split on terminal punctuation, dropping fragments too short to search for."""
    sentences = []
    for s in _SENTENCE_END_RE.split(norm_text):
        s = s.strip()
        if len(s) > min_length:
            sentences.append(s)
    return sentences


def _fixed_windows(norm_text: str, chunk_size: int, max_chunks: int, min_chunk_length: int) -> List[str]:
    chunks: List[str] = []
    for i in range(0, len(norm_text), chunk_size):
        if len(chunks) >= max_chunks:
            break
        window = norm_text[i:i + chunk_size].strip()
        if len(window) > min_chunk_length:
            chunks.append(window)
    return chunks


def _fit_sentences(sentences: List[str], chunk_size: int) -> List[str]:
    """Cut any sentence longer than ``chunk_size`` into windows of that size."""
    pieces: List[str] = []
    for sentence in sentences:
        if len(sentence) <= chunk_size:
            pieces.append(sentence)
            continue
        for i in range(0, len(sentence), chunk_size):
            window = sentence[i:i + chunk_size].strip()
            if window:
                pieces.append(window)
    return pieces


def split_into_chunks(
    text: str,
    chunk_size: int = CHUNK_SIZE,
    max_chunks: int = MAX_CHUNKS,
    min_chunk_length: int = MIN_CHUNK_LENGTH,
    min_sentence_length: int = MIN_SENTENCE_LENGTH,
) -> List[str]:
    """
    Group sentences into at most ``max_chunks`` chunks of at most ``chunk_size``
    characters. A chunk is emitted only once it is longer than
    ``min_chunk_length``; sentences longer than ``chunk_size`` are cut into
    windows first. Text without terminal punctuation, or without any sentence
    long enough to keep, is cut into fixed windows instead.
    """
    processed = normalize_text(text)
    # Unpunctuated text has no sentences to align to
    if _SENTENCE_END_RE.search(processed):
        sentences = _fit_sentences(
            split_into_sentences(processed, min_length=min_sentence_length), chunk_size
        )
    else:
        sentences = []

    chunks: List[str] = []
    current = ""
    for sentence in sentences:
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) > chunk_size:
            if len(current) > min_chunk_length:
                chunks.append(current)
            current = sentence
        else:
            current = candidate

        if len(chunks) >= max_chunks:
            break

    if len(current) > min_chunk_length and len(chunks) < max_chunks:
        chunks.append(current)

    if not chunks:
        chunks = _fixed_windows(processed, chunk_size, max_chunks, min_chunk_length)

    return chunks


def build_search_query(chunk: str, max_length: int = QUERY_MAX_LENGTH) -> str:
    """Exact-phrase query from the start of a chunk."""
    trimmed = chunk[:max_length].strip()
    cleaned = _QUOTES_RE.sub("", trimmed)
    return f'"{cleaned}"'
