"""
Claude LLM Provider Implementation

Uses the Anthropic SDK's async client to generate remediation suggestions.
"""

import logging

from anthropic import AsyncAnthropic, APIError, APITimeoutError

from a11y_audit.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class ClaudeProvider(LLMProvider):
    """
    Claude LLM Provider using Anthropic API.
    """

    name = "Claude"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-haiku-latest",
        timeout: float = 20.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Claude model ID (default: claude-3-5-haiku-latest)
            timeout: Request timeout in seconds (default: 20)
        """
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.client = AsyncAnthropic(api_key=api_key)

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 100,
        temperature: float = 0.3,
    ) -> str:
        """
        Make a request to Claude API.

        Args:
            prompt: The prompt to send to Claude
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature

        Returns:
            Claude's response text

        Raises:
            TimeoutError: If request exceeds timeout
            RuntimeError: If API returns an error
        """
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[
                    {
                        "role": "user",
                        "content": prompt,
                    }
                ],
                timeout=self.timeout,
            )
        except APITimeoutError as e:
            logger.warning(f"Claude API timeout after {self.timeout}s: {str(e)}")
            raise TimeoutError(f"Claude request timed out: {str(e)}")

        except APIError as e:
            logger.warning(f"Claude API error: {str(e)}")
            raise RuntimeError(f"Claude API error: {str(e)}")

        # Extract text from response
        if message.content and len(message.content) > 0:
            response_text = getattr(message.content[0], "text", None)
            if isinstance(response_text, str):
                logger.debug(f"Claude response: {response_text[:200]}")
                return response_text

        raise RuntimeError("Claude returned empty response")

    async def aclose(self) -> None:
        await self.client.close()
