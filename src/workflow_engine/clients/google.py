"""Google Gemini client implementation using the google-genai SDK.

This client handles communication with the Google Gemini API.

Google Gemini has unique requirements:
- Generation parameters go in a GenerateContentConfig
- The max output length is called max_output_tokens
- Text lives in candidates[0].content.parts[0].text
- Request timeouts are configured in milliseconds via HttpOptions

Supported models:
- gemini-flash-latest
- gemini-2.5-pro
- gemini-2.5-flash
"""

from typing import Any

import httpx
from google import genai
from google.genai import types
from google.genai.errors import APIError, ClientError, ServerError

from ..exceptions import (
    AuthenticationError,
    ProviderCallError,
    ProviderUnavailableError,
    RateLimitError,
    StepTimeoutError,
)
from .base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    """Google Gemini API client using the google-genai SDK."""

    provider_name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-flash-latest",
        client_config: dict | None = None,
        timeout: float | None = None,
    ):
        """Initialize the Gemini client.

        Args:
            api_key: Google API key.
            model: Model to use. Defaults to gemini-flash-latest.
            client_config: Optional configuration parameters:
                - temperature: float
                - max_tokens: int (default 4096)
            timeout: Request timeout in seconds.
        """
        super().__init__(api_key, model, client_config, timeout)

        http_options = None
        if timeout is not None:
            http_options = types.HttpOptions(timeout=int(timeout * 1000))
        self.client = genai.Client(api_key=api_key, http_options=http_options)

    def _build_generation_config(self) -> types.GenerateContentConfig:
        """Build the generation config from client configuration."""
        config_kwargs: dict[str, Any] = {
            "max_output_tokens": self.max_tokens,
        }
        if self.temperature is not None:
            config_kwargs["temperature"] = self.temperature
        return types.GenerateContentConfig(**config_kwargs)

    def _call(self, prompt: str) -> Any:
        try:
            return self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._build_generation_config(),
            )
        except ClientError as e:
            if e.code in (401, 403):
                raise AuthenticationError(f"Gemini authentication failed: {e}") from e
            if e.code == 429:
                raise RateLimitError("Gemini rate limit exceeded") from e
            raise ProviderCallError(f"Gemini API error: {e}", e.code) from e
        except ServerError as e:
            raise ProviderUnavailableError(f"Gemini API unavailable: {e}") from e
        except APIError as e:
            raise ProviderCallError(f"Gemini API error: {e}", e.code) from e
        except httpx.TimeoutException as e:
            raise StepTimeoutError("gemini", self.timeout) from e
        except httpx.TransportError as e:
            raise ProviderUnavailableError(f"Gemini API unavailable: {e}") from e

    def _extract_text(self, response: Any) -> str | None:
        return response.candidates[0].content.parts[0].text
