from fastapi import APIRouter, Depends, File, UploadFile
from typing import Callable

from content_checker.dependencies.clients import get_search_client_factory
from content_checker.logger import get_logger
from content_checker.schemas.plagiarism_schemas import (
    ChunkMatch,
    PlagiarismData,
    PlagiarismResponse,
    TextCheckRequest,
)
from content_checker.utils.file_utils import extract_text_from_file
from content_checker.utils.plagiarism_engine import (
    PlagiarismResult,
    check_plagiarism,
    similarity_verdict,
)
from content_checker.utils.web_utils import SearchClient

router = APIRouter(prefix="/plagiarism-check", tags=["plagiarism-check"])

logger = get_logger("plagiarism_check")


def _to_response(result: PlagiarismResult) -> PlagiarismResponse:
    return PlagiarismResponse(
        success=True,
        data=PlagiarismData(
            plagiarismScore=result.plagiarism_score,
            matches=[
                ChunkMatch(
                    chunkIndex=m.chunk_index,
                    chunkText=m.chunk_text,
                    url=m.url,
                    title=m.title,
                    snippet=m.snippet,
                    similarity=m.similarity,
                )
                for m in result.matches
            ],
            verdict=similarity_verdict(result.plagiarism_score),
        ),
    )


@router.post("", response_model=PlagiarismResponse, response_model_exclude_none=True)
def plagiarism_check(
    payload: TextCheckRequest,
    search_client_factory: Callable[[], SearchClient] = Depends(get_search_client_factory),
):
    result = check_plagiarism(payload.text, search_client_factory)
    return _to_response(result)


@router.post("/file", response_model=PlagiarismResponse, response_model_exclude_none=True)
def plagiarism_check_file(
    file: UploadFile = File(...),
    search_client_factory: Callable[[], SearchClient] = Depends(get_search_client_factory),
):
    logger.info(f"📄 Processing uploaded file: {file.filename}")
    text = extract_text_from_file(file.file.read(), file.filename or "")
    result = check_plagiarism(text, search_client_factory)
    return _to_response(result)
