"""
AI-generated text detection through the Hugging Face Inference API.
Returns a label ('ai' | 'human') and the model's AI score (0-1).
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from huggingface_hub import InferenceClient, InferenceTimeoutError
from huggingface_hub.utils import HfHubHTTPError

from content_checker import config
from content_checker.config import LIKELY_AI_SCORE, MAX_AI_TEXT_LENGTH, POSSIBLY_AI_SCORE
from content_checker.errors import (
    ConfigurationError,
    ExternalServiceError,
    ExternalServiceUnavailable,
    InputValidationError,
)
from content_checker.logger import get_logger

logger = get_logger("ai_detector")

MODEL_LOADING_MESSAGE = "AI model is loading. Please try again in a few seconds."

_AI_MARKERS = ("ai", "fake", "generated")
_HUMAN_MARKERS = ("human", "real")

# Lazy load client so a missing key is reported per request
_hf_client: Optional[InferenceClient] = None


@dataclass
class AIDetectionResult:
    label: str
    score: float
    raw: Any


def get_hf_client() -> InferenceClient:
    global _hf_client
    if not config.HUGGINGFACE_API_KEY:
        logger.error("Configuration error: HUGGINGFACE_API_KEY not set")
        raise ConfigurationError("Server configuration error: API key not set")
    if _hf_client is None:
        _hf_client = InferenceClient(api_key=config.HUGGINGFACE_API_KEY)
        logger.info("✓ HuggingFace client initialized")
    return _hf_client


def validate_ai_text(text: Any, max_length: int = MAX_AI_TEXT_LENGTH) -> str:
    if not text or not isinstance(text, str):
        raise InputValidationError("Text is required and must be a string")
    if not text.strip():
        raise InputValidationError("Text cannot be empty")
    if len(text) > max_length:
        raise InputValidationError(f"Text cannot exceed {max_length} characters")
    return text


def _as_dict(prediction: Any) -> Dict[str, Any]:
    # huggingface_hub output elements are dict subclasses
    return {
        "label": str(prediction.get("label", "")),
        "score": float(prediction.get("score", 0.0)),
    }


def _flatten(raw: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw, list) or not raw:
        return []
    predictions = raw[0] if isinstance(raw[0], list) else raw
    return [_as_dict(p) for p in predictions]


def _is_ai_label(label: str) -> bool:
    lowered = label.lower()
    return label == "LABEL_1" or any(m in lowered for m in _AI_MARKERS)


def _is_human_label(label: str) -> bool:
    lowered = label.lower()
    return label == "LABEL_0" or any(m in lowered for m in _HUMAN_MARKERS)


def interpret_predictions(raw: Any) -> Tuple[str, float]:
    """
    Map classifier output to ``(label, ai_score)``.

    roberta-base-openai-detector answers with LABEL_0 = human, LABEL_1 = AI;
    other detectors name their labels ("Fake"/"Real", "AI"/"Human"), so the
    AI side is looked up first, then the human side, then the top prediction.
    """
    predictions = _flatten(raw)
    if not predictions:
        return "human", 0.0

    ai_prediction = next((p for p in predictions if _is_ai_label(p["label"])), None)
    if ai_prediction:
        score = ai_prediction["score"]
        return ("ai" if score > 0.5 else "human"), score

    human_prediction = next((p for p in predictions if _is_human_label(p["label"])), None)
    if human_prediction:
        score = 1.0 - human_prediction["score"]
        return ("human" if human_prediction["score"] > 0.5 else "ai"), score

    top = predictions[0]
    label = "ai" if "1" in top["label"] or "ai" in top["label"].lower() else "human"
    return label, top["score"]


def ai_verdict(score: float) -> str:
    if score >= LIKELY_AI_SCORE:
        return "Likely AI-Generated"
    if score >= POSSIBLY_AI_SCORE:
        return "Possibly AI-Generated"
    return "Likely Human-Written"


def detect_ai_content(text: Any, client: Optional[InferenceClient] = None) -> AIDetectionResult:
    """
    Classify ``text`` as AI-generated or human-written.

    Raises:
        InputValidationError: text missing, blank or too long.
        ConfigurationError: no Hugging Face API key.
        ExternalServiceUnavailable: model still loading (HTTP 503) or timed out.
        ExternalServiceError: any other inference API failure.
    """
    text = validate_ai_text(text)
    client = client or get_hf_client()

    logger.info(f"Calling Hugging Face model {config.HUGGINGFACE_MODEL} ({len(text)} characters)")
    try:
        result = client.text_classification(text, model=config.HUGGINGFACE_MODEL)
    except InferenceTimeoutError as e:
        logger.warning(f"Hugging Face inference timed out: {e}")
        raise ExternalServiceUnavailable(MODEL_LOADING_MESSAGE) from e
    except HfHubHTTPError as e:
        response = getattr(e, "response", None)
        status = getattr(response, "status_code", None) or 502
        logger.error(f"❌ Hugging Face API error: {status} - {e}")
        if status == 503:
            raise ExternalServiceUnavailable(MODEL_LOADING_MESSAGE) from e
        raise ExternalServiceError(f"Hugging Face API error: {status}", status_code=status) from e

    label, score = interpret_predictions(result)
    logger.info(f"✅ Detection result - Label: {label}, Score: {score:.4f}")
    return AIDetectionResult(label=label, score=score, raw=result)
