"""
OpenRouter LLM Provider Implementation

Uses OpenRouter API to reach many hosted models (Mistral, Claude, GPT, Llama)
through a single OpenAI-compatible interface.
"""

import logging
from typing import Dict

from a11y_audit.llm.chat_completions import ChatCompletionsProvider

logger = logging.getLogger(__name__)


class OpenRouterProvider(ChatCompletionsProvider):
    """
    OpenRouter LLM Provider.

    Accepts either full OpenRouter model ids or the shortcuts in MODELS.
    """

    name = "OpenRouter"

    DEFAULT_MODEL = "mistralai/mistral-7b-instruct"

    # Small, cheap models are enough for one or two sentence fixes
    MODELS = {
        "mistral-7b": "mistralai/mistral-7b-instruct",
        "mixtral": "mistralai/mixtral-8x7b-instruct",
        "claude-3.5-haiku": "anthropic/claude-3.5-haiku",
        "gpt-4o-mini": "openai/gpt-4o-mini",
        "llama-3.1-8b": "meta-llama/llama-3.1-8b-instruct",
    }

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = 20.0,
    ):
        """
        Initialize OpenRouter provider.

        Args:
            api_key: OpenRouter API key (from https://openrouter.ai)
            model: Full model path (e.g. "mistralai/mistral-7b-instruct")
                   or shorthand (e.g. "mistral-7b")
            timeout: Request timeout in seconds (default: 20)

        Raises:
            ValueError: If API key is empty
        """
        super().__init__(
            api_key=api_key,
            model=self.MODELS.get(model, model),
            base_url="https://openrouter.ai/api/v1",
            timeout=timeout,
        )
        logger.info(f"Initialized OpenRouter provider with model: {self.model}")

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["X-Title"] = "Accessibility Audit"
        return headers
