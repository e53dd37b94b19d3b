"""Anthropic client implementation.

This client handles communication with the Anthropic Messages API
(Claude models).

Anthropic has unique requirements:
- max_tokens is mandatory on every request
- The response is a list of content blocks; the text is in the first one
"""

from typing import Any

from anthropic import Anthropic, APIConnectionError, APIStatusError, APITimeoutError
from anthropic import AuthenticationError as AnthropicAuthError
from anthropic import RateLimitError as AnthropicRateLimitError

from ..exceptions import (
    AuthenticationError,
    ProviderCallError,
    ProviderUnavailableError,
    RateLimitError,
    StepTimeoutError,
)
from .base import BaseLLMClient


class AnthropicClient(BaseLLMClient):
    """Anthropic API client."""

    provider_name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        client_config: dict | None = None,
        timeout: float | None = None,
    ):
        """Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key.
            model: Model to use. Defaults to Claude Sonnet 4.5.
            client_config: Optional configuration parameters:
                - temperature: float (0.0-1.0)
                - max_tokens: int (default 4096)
            timeout: Request timeout in seconds.
        """
        super().__init__(api_key, model, client_config, timeout)
        if timeout is not None:
            self.client = Anthropic(api_key=api_key, timeout=timeout, max_retries=0)
        else:
            self.client = Anthropic(api_key=api_key, max_retries=0)

    def _build_api_kwargs(self, prompt: str) -> dict[str, Any]:
        """Build the API kwargs from configuration."""
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
        }
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        return kwargs

    def _call(self, prompt: str) -> Any:
        kwargs = self._build_api_kwargs(prompt)
        try:
            return self.client.messages.create(**kwargs)
        except AnthropicAuthError as e:
            raise AuthenticationError(f"Anthropic authentication failed: {e}") from e
        except AnthropicRateLimitError as e:
            raise RateLimitError("Anthropic rate limit exceeded") from e
        except APITimeoutError as e:
            raise StepTimeoutError("anthropic", self.timeout) from e
        except APIConnectionError as e:
            raise ProviderUnavailableError(f"Anthropic API unavailable: {e}") from e
        except APIStatusError as e:
            raise ProviderCallError(f"Anthropic API error: {e.message}", e.status_code) from e

    def _extract_text(self, response: Any) -> str | None:
        return response.content[0].text
