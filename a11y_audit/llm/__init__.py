"""
LLM Provider Module

Provides pluggable abstraction for different LLM backends (Hugging Face,
OpenRouter, Claude, Ollama).
"""

from a11y_audit.llm.provider import LLMProvider, get_llm_provider
from a11y_audit.llm.chat_completions import ChatCompletionsProvider
from a11y_audit.llm.huggingface import HuggingFaceProvider
from a11y_audit.llm.openrouter import OpenRouterProvider
from a11y_audit.llm.claude import ClaudeProvider
from a11y_audit.llm.ollama import OllamaProvider

__all__ = [
    "LLMProvider",
    "get_llm_provider",
    "ChatCompletionsProvider",
    "HuggingFaceProvider",
    "OpenRouterProvider",
    "ClaudeProvider",
    "OllamaProvider",
]
