"""
Ollama LLM Provider Implementation

Connects to local Ollama instance for running open-source models locally.
Useful for development and testing without API costs.
"""

import logging

import httpx

from a11y_audit.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class OllamaProvider(LLMProvider):
    """
    Ollama LLM Provider for local model inference.

    Supports any model installed in Ollama (mistral, llama3, etc.)
    """

    name = "Ollama"

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "mistral",
        timeout: float = 20.0,
    ):
        """
        Initialize Ollama provider.

        Args:
            base_url: Base URL of Ollama instance (default: http://localhost:11434)
            model: Model name to use (default: mistral)
            timeout: Request timeout in seconds (default: 20)
        """
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 100,
        temperature: float = 0.3,
    ) -> str:
        """
        Make a request to Ollama API.

        Args:
            prompt: The prompt to send to Ollama
            max_tokens: Upper bound on generated tokens (Ollama `num_predict`)
            temperature: Sampling temperature

        Returns:
            Ollama's response text

        Raises:
            TimeoutError: If request exceeds timeout
            RuntimeError: If Ollama returns an error
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/api/generate",
                    json={
                        "model": self.model,
                        "prompt": prompt,
                        "stream": False,
                        "options": {
                            "num_predict": max_tokens,
                            "temperature": temperature,
                        },
                    },
                )
            response.raise_for_status()
            data = response.json()

        except httpx.TimeoutException:
            logger.warning(f"Ollama request timeout after {self.timeout}s")
            raise TimeoutError(f"Ollama request timed out after {self.timeout}s")

        except httpx.HTTPStatusError as e:
            logger.warning(f"Ollama HTTP error: {str(e)}")
            raise RuntimeError(f"Ollama HTTP error: {str(e)}")

        except httpx.RequestError as e:
            logger.warning(f"Connection error to Ollama: {str(e)}")
            raise RuntimeError(
                f"Connection error to Ollama at {self.base_url}: {str(e)}"
            )

        except ValueError as e:
            raise RuntimeError(f"Invalid JSON response from Ollama: {str(e)}")

        if isinstance(data, dict) and isinstance(data.get("response"), str):
            logger.debug(f"Ollama response: {data['response'][:200]}")
            return data["response"]

        raise RuntimeError("Ollama returned unexpected response format")
