from fastapi import APIRouter, Depends, File, UploadFile
from huggingface_hub import InferenceClient
from typing import Callable

from content_checker.dependencies.clients import get_classifier_factory
from content_checker.logger import get_logger
from content_checker.schemas.ai_detect_schemas import AIDetectData, AIDetectResponse
from content_checker.schemas.plagiarism_schemas import TextCheckRequest
from content_checker.utils.ai_detector import (
    ai_verdict,
    detect_ai_content,
    validate_ai_text,
)
from content_checker.utils.file_utils import extract_text_from_file

router = APIRouter(prefix="/ai-detect", tags=["ai-detect"])

logger = get_logger("ai_detect")


def _detect(text, classifier_factory: Callable[[], InferenceClient]) -> AIDetectResponse:
    # Validate before touching credentials
    text = validate_ai_text(text)
    result = detect_ai_content(text, client=classifier_factory())
    return AIDetectResponse(
        success=True,
        data=AIDetectData(
            label=result.label,
            score=result.score,
            raw=result.raw,
            verdict=ai_verdict(result.score),
        ),
    )


@router.post("", response_model=AIDetectResponse, response_model_exclude_none=True)
def ai_detect(
    payload: TextCheckRequest,
    classifier_factory: Callable[[], InferenceClient] = Depends(get_classifier_factory),
):
    return _detect(payload.text, classifier_factory)


@router.post("/file", response_model=AIDetectResponse, response_model_exclude_none=True)
def ai_detect_file(
    file: UploadFile = File(...),
    classifier_factory: Callable[[], InferenceClient] = Depends(get_classifier_factory),
):
    logger.info(f"📄 Processing uploaded file: {file.filename}")
    text = extract_text_from_file(file.file.read(), file.filename or "")
    return _detect(text, classifier_factory)
