"""OpenAI client implementation.

This client handles communication with the OpenAI chat completions API.
"""

from contextlib import contextmanager
from typing import Any

from openai import APIConnectionError, APIStatusError, APITimeoutError, OpenAI
from openai import AuthenticationError as OpenAIAuthError
from openai import RateLimitError as OpenAIRateLimitError

from ..exceptions import (
    AuthenticationError,
    ProviderCallError,
    ProviderUnavailableError,
    RateLimitError,
    StepTimeoutError,
)
from .openai_compat import OpenAICompatibleClient


class OpenAIClient(OpenAICompatibleClient):
    """OpenAI API client."""

    provider_name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        client_config: dict | None = None,
        timeout: float | None = None,
    ):
        """Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key.
            model: Model to use. Defaults to gpt-4o.
            client_config: Optional temperature / max_tokens.
            timeout: Request timeout in seconds.
        """
        super().__init__(api_key, model, client_config, timeout)

    def _create_client(self, api_key: str) -> OpenAI:
        """Create the OpenAI SDK client."""
        if self.timeout is not None:
            return OpenAI(api_key=api_key, timeout=self.timeout, max_retries=0)
        return OpenAI(api_key=api_key, max_retries=0)

    def _get_default_api_args(self) -> dict[str, Any]:
        """Return default API arguments for OpenAI."""
        return {}  # OpenAI uses API defaults

    @contextmanager
    def _handle_api_errors(self):
        """Handle OpenAI-specific errors."""
        try:
            yield
        except OpenAIAuthError as e:
            raise AuthenticationError(f"OpenAI authentication failed: {e}") from e
        except OpenAIRateLimitError as e:
            raise RateLimitError("OpenAI rate limit exceeded") from e
        except APITimeoutError as e:
            raise StepTimeoutError("openai", self.timeout) from e
        except APIConnectionError as e:
            raise ProviderUnavailableError(f"OpenAI API unavailable: {e}") from e
        except APIStatusError as e:
            raise ProviderCallError(f"OpenAI API error: {e.message}", e.status_code) from e
