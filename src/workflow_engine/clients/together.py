"""Together AI client implementation.

Together AI provides an OpenAI-compatible API, so this client
extends OpenAICompatibleClient with Together-specific handling.
"""

from contextlib import contextmanager
from typing import Any

from together import Together
from together.error import AuthenticationError as TogetherAuthError
from together.error import RateLimitError as TogetherRateLimitError

from ..exceptions import (
    AuthenticationError,
    ProviderCallError,
    ProviderUnavailableError,
    RateLimitError,
    StepTimeoutError,
)
from .openai_compat import OpenAICompatibleClient


class TogetherClient(OpenAICompatibleClient):
    """Together AI client.

    Together AI uses an OpenAI-compatible API, supporting models like
    Meta-Llama, Mistral, and others.
    """

    provider_name = "together"

    def __init__(
        self,
        api_key: str,
        model: str = "meta-llama/Meta-Llama-3.1-70B-Instruct-Turbo",
        client_config: dict | None = None,
        timeout: float | None = None,
    ):
        super().__init__(api_key, model, client_config, timeout)

    def _create_client(self, api_key: str) -> Together:
        """Create the Together SDK client."""
        return Together(api_key=api_key, timeout=self.timeout, max_retries=0)

    def _get_default_api_args(self) -> dict[str, Any]:
        """Return default API arguments for Together."""
        return {"max_tokens": 4096}

    @contextmanager
    def _handle_api_errors(self):
        """Handle Together-specific errors."""
        try:
            yield
        except TogetherAuthError as e:
            raise AuthenticationError(f"Together authentication failed: {e}") from e
        except TogetherRateLimitError as e:
            raise RateLimitError("Together rate limit exceeded") from e
        except Exception as e:
            message = str(e).lower()
            if "timeout" in message or "timed out" in message:
                raise StepTimeoutError("together", self.timeout) from e
            if "connection" in message:
                raise ProviderUnavailableError(f"Together API unavailable: {e}") from e
            raise ProviderCallError(
                f"Together API error: {e}", getattr(e, "http_status", None)
            ) from e
