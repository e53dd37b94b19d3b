"""Base class for OpenAI-compatible API clients.

This class provides shared implementation for providers that use the
OpenAI-compatible chat completions format (OpenAI, Together).
"""

from abc import abstractmethod
from contextlib import contextmanager
from typing import Any

from .base import BaseLLMClient


class OpenAICompatibleClient(BaseLLMClient):
    """Base class for clients using the OpenAI-compatible API format.

    Subclasses must implement:
    - _create_client(): initialize the provider SDK client
    - _get_default_api_args(): return provider-specific default arguments
    - _handle_api_errors(): context manager for exception mapping
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        client_config: dict | None = None,
        timeout: float | None = None,
    ):
        super().__init__(api_key, model, client_config, timeout)
        self.client = self._create_client(api_key)

    @abstractmethod
    def _create_client(self, api_key: str) -> Any:
        """Create the provider's SDK client instance."""

    @abstractmethod
    def _get_default_api_args(self) -> dict[str, Any]:
        """Return provider-specific default API arguments."""

    @abstractmethod
    @contextmanager
    def _handle_api_errors(self):
        """Context manager for handling provider-specific errors.

        Should catch provider exceptions and re-raise as our exceptions:
        - AuthenticationError
        - RateLimitError
        - StepTimeoutError
        - ProviderUnavailableError
        - ProviderCallError
        """

    def _call(self, prompt: str) -> Any:
        api_args: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            **self._get_default_api_args(),
        }
        if self.temperature is not None:
            api_args["temperature"] = self.temperature
        if "max_tokens" in self.client_config:
            api_args["max_tokens"] = self.client_config["max_tokens"]

        with self._handle_api_errors():
            return self.client.chat.completions.create(**api_args)

    def _extract_text(self, response: Any) -> str | None:
        return response.choices[0].message.content
