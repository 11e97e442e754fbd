"""
OpenAI-compatible Chat Completions Provider

Shared request/response handling for hosted inference APIs that speak the
OpenAI chat completions format (Hugging Face router, OpenRouter).
"""

import json
import logging
from typing import Dict

import httpx

from a11y_audit.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class ChatCompletionsProvider(LLMProvider):
    """
    Base provider for OpenAI-compatible `/chat/completions` endpoints.

    Subclasses set `name` and may extend `_headers()`.
    """

    name = "chat-completions"

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 20.0,
    ):
        """
        Initialize provider.

        Args:
            api_key: Bearer token for the API
            model: Model identifier
            base_url: API base URL (without trailing /chat/completions)
            timeout: Request timeout in seconds

        Raises:
            ValueError: If API key is empty
        """
        if not api_key or not api_key.strip():
            raise ValueError(f"{self.name} API key cannot be empty")

        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 100,
        temperature: float = 0.3,
    ) -> str:
        """
        Make a chat completions request.

        Args:
            prompt: The prompt to send to the model
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature

        Returns:
            Model's response text

        Raises:
            TimeoutError: If request exceeds timeout
            RuntimeError: If API returns an error or an unexpected payload
        """
        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                }
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers=self._headers(),
                    json=payload,
                )

            # Check for HTTP errors
            if response.status_code != 200:
                error_msg = f"HTTP {response.status_code}"
                try:
                    error = response.json().get("error")
                    if isinstance(error, dict):
                        error_msg = error.get("message", error_msg)
                    elif error:
                        error_msg = str(error)
                except (ValueError, AttributeError):
                    pass
                logger.warning(f"{self.name} API error: {error_msg}")
                raise RuntimeError(f"{self.name} API error: {error_msg}")

            response_data = response.json()

        except httpx.TimeoutException as e:
            logger.warning(f"{self.name} API timeout after {self.timeout}s: {str(e)}")
            raise TimeoutError(f"{self.name} request timed out: {str(e)}")

        except httpx.RequestError as e:
            logger.warning(f"{self.name} request error: {str(e)}")
            raise RuntimeError(f"{self.name} request error: {str(e)}")

        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse {self.name} response: {str(e)}")
            raise RuntimeError(f"Invalid JSON response from {self.name}: {str(e)}")

        # Extract text from response
        try:
            content = response_data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise RuntimeError(f"{self.name} returned unexpected response format")

        if not isinstance(content, str):
            raise RuntimeError(f"{self.name} returned empty response")

        logger.debug(f"{self.name} response: {content[:200]}")
        return content
