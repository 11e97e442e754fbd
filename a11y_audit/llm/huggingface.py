"""
Hugging Face Inference Provider

Calls hosted open models (Mistral by default) through the Hugging Face
router's OpenAI-compatible chat completions endpoint.
"""

import logging

from a11y_audit.llm.chat_completions import ChatCompletionsProvider

logger = logging.getLogger(__name__)


class HuggingFaceProvider(ChatCompletionsProvider):
    """Hugging Face Inference provider."""

    name = "HuggingFace"

    DEFAULT_MODEL = "mistralai/Mistral-7B-Instruct-v0.2"
    DEFAULT_BASE_URL = "https://router.huggingface.co/v1"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 20.0,
    ):
        super().__init__(api_key=api_key, model=model, base_url=base_url, timeout=timeout)
        logger.info(f"Initialized Hugging Face provider with model: {self.model}")
