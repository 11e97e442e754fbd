"""
Abstract LLM Provider Interface

Defines the interface that all LLM providers must implement.
Provides factory for creating provider instances based on configuration.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from a11y_audit.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    All LLM providers (Hugging Face, OpenRouter, Claude, Ollama) must
    implement this interface to be usable by the suggestion enricher.
    """

    name = "llm"

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        max_tokens: int = 100,
        temperature: float = 0.3,
    ) -> str:
        """
        Generate text for a single-turn prompt.

        Args:
            prompt: User prompt sent to the model
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature

        Returns:
            Generated text (untrimmed)

        Raises:
            TimeoutError: If the request takes too long
            RuntimeError: If the provider is unavailable or the response
                is malformed
        """
        pass

    async def aclose(self) -> None:
        """Release any client resources held by the provider."""
        return None


def get_llm_provider(config: Optional[Settings] = None) -> Optional[LLMProvider]:
    """
    Factory function to create LLM provider based on configuration.

    A provider whose credential is missing is treated as unconfigured rather
    than as an error: suggestions then come from the fallback generator.

    Args:
        config: Settings to read (defaults to the global settings)

    Returns:
        Configured provider instance, or None when AI suggestions are disabled
    """
    config = config or default_settings
    provider_name = config.llm_provider.lower()

    if provider_name == "none":
        logger.info("LLM provider disabled; using fallback suggestions")
        return None

    if provider_name == "huggingface":
        from a11y_audit.llm.huggingface import HuggingFaceProvider

        if not config.hf_api_key:
            logger.info("HF_API_KEY not configured; using fallback suggestions")
            return None

        return HuggingFaceProvider(
            api_key=config.hf_api_key,
            model=config.hf_model,
            base_url=config.hf_base_url,
            timeout=config.llm_timeout,
        )

    elif provider_name == "openrouter":
        from a11y_audit.llm.openrouter import OpenRouterProvider

        if not config.openrouter_api_key:
            logger.info("OPENROUTER_API_KEY not configured; using fallback suggestions")
            return None

        return OpenRouterProvider(
            api_key=config.openrouter_api_key,
            model=config.openrouter_model,
            timeout=config.llm_timeout,
        )

    elif provider_name == "claude":
        from a11y_audit.llm.claude import ClaudeProvider

        if not config.claude_api_key:
            logger.info("CLAUDE_API_KEY not configured; using fallback suggestions")
            return None

        return ClaudeProvider(
            api_key=config.claude_api_key,
            model=config.claude_model,
            timeout=config.llm_timeout,
        )

    elif provider_name == "ollama":
        from a11y_audit.llm.ollama import OllamaProvider

        return OllamaProvider(
            base_url=config.ollama_base_url,
            model=config.ollama_model,
            timeout=config.llm_timeout,
        )

    else:
        raise ValueError(
            f"Unknown LLM provider: {provider_name}. "
            f"Must be 'huggingface', 'openrouter', 'claude', 'ollama' or 'none'"
        )
