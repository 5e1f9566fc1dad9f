# content_checker/dependencies/clients.py

from typing import Callable

from huggingface_hub import InferenceClient

from content_checker import config
from content_checker.errors import ConfigurationError
from content_checker.logger import get_logger
from content_checker.utils.ai_detector import get_hf_client
from content_checker.utils.web_utils import GoogleSearchClient, SearchClient

logger = get_logger("dependencies")


def build_search_client() -> SearchClient:
    if not config.GOOGLE_CSE_API_KEY or not config.GOOGLE_CSE_SEARCH_ENGINE_ID:
        logger.error("Configuration error: Google CSE credentials not set")
        raise ConfigurationError("Server configuration error: Google CSE not configured")
    return GoogleSearchClient(config.GOOGLE_CSE_API_KEY, config.GOOGLE_CSE_SEARCH_ENGINE_ID)


# Providers hand out factories so credentials are checked only after the
# request body has been validated.
def get_search_client_factory() -> Callable[[], SearchClient]:
    return build_search_client


def get_classifier_factory() -> Callable[[], InferenceClient]:
    return get_hf_client
