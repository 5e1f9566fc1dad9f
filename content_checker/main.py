from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from content_checker import config
from content_checker.errors import CheckerError
from content_checker.logger import get_logger
from content_checker.routers.ai_detect import router as ai_detect_router
from content_checker.routers.plagiarism_check import router as plagiarism_check_router

logger = get_logger("main")

app = FastAPI(title="Content Checker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(plagiarism_check_router)
app.include_router(ai_detect_router)


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(CheckerError)
async def _handle_checker_error(request: Request, exc: CheckerError):
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return _error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def _handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any("text" in err.get("loc", ()) for err in errors):
        message = "Text is required and must be a string"
    elif errors:
        message = f"Invalid request: {errors[0].get('msg', 'validation failed')}"
    else:
        message = "Invalid request"
    logger.error(f"Validation error on {request.url.path}: {message}")
    return _error_response(message, 400)


@app.exception_handler(Exception)
async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Error in {request.url.path}: {exc}")
    return _error_response(str(exc) or "An unexpected error occurred", 500)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "searchConfigured": bool(config.GOOGLE_CSE_API_KEY and config.GOOGLE_CSE_SEARCH_ENGINE_ID),
        "aiDetectionConfigured": bool(config.HUGGINGFACE_API_KEY),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
