import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = str(os.getenv(name, "")).strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    value = str(os.getenv(name, "")).strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


# ───── API Keys & URLs ─────
GOOGLE_CSE_API_KEY = os.getenv("GOOGLE_CSE_API_KEY", "")
GOOGLE_CSE_SEARCH_ENGINE_ID = os.getenv("GOOGLE_CSE_SEARCH_ENGINE_ID", "")
GOOGLE_CSE_ENDPOINT = os.getenv("GOOGLE_CSE_ENDPOINT", "https://www.googleapis.com/customsearch/v1")

HUGGINGFACE_API_KEY = os.getenv("HUGGINGFACE_API_KEY", "")
HUGGINGFACE_MODEL = (
    os.getenv("HUGGINGFACE_MODEL_URL")
    or os.getenv("HUGGINGFACE_MODEL")
    or "openai-community/roberta-base-openai-detector"
)

# ───── Plagiarism engine ─────
MAX_TEXT_LENGTH = _env_int("MAX_TEXT_LENGTH", 5000)
CHUNK_SIZE = _env_int("CHUNK_SIZE", 250)
MAX_CHUNKS = _env_int("MAX_CHUNKS", 5)
MIN_CHUNK_LENGTH = _env_int("MIN_CHUNK_LENGTH", 50)
MIN_SENTENCE_LENGTH = _env_int("MIN_SENTENCE_LENGTH", 20)
QUERY_MAX_LENGTH = _env_int("QUERY_MAX_LENGTH", 120)
RESULTS_PER_CHUNK = _env_int("RESULTS_PER_CHUNK", 3)
RELEVANCE_FLOOR = _env_float("RELEVANCE_FLOOR", 0.1)
MAX_REPORTED_MATCHES = _env_int("MAX_REPORTED_MATCHES", 10)
CHUNK_PREVIEW_LENGTH = _env_int("CHUNK_PREVIEW_LENGTH", 200)

# Score bands shown to students
HIGH_SIMILARITY_SCORE = 0.5
SOME_SIMILARITY_SCORE = 0.2

# ───── Timing ─────
POLITENESS_DELAY = _env_float("POLITENESS_DELAY", 0.2)
SEARCH_TIMEOUT = _env_float("SEARCH_TIMEOUT", 6)
REQUEST_TIMEOUT = _env_float("REQUEST_TIMEOUT", 30)

# ───── AI detection ─────
MAX_AI_TEXT_LENGTH = _env_int("MAX_AI_TEXT_LENGTH", 10000)
LIKELY_AI_SCORE = 0.7
POSSIBLY_AI_SCORE = 0.4

# ───── File support ─────
ALLOWED_EXTENSIONS = {"txt", "pdf", "docx"}
MAX_FILE_SIZE_MB = _env_int("MAX_FILE_SIZE_MB", 5)

# ───── Server ─────
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 8000)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "")
