"""Base class for LLM provider clients.

All provider clients inherit from BaseLLMClient. Each one owns its
provider's request envelope, response envelope and error mapping, and
exposes a single ``complete(prompt)`` call to the gateway.
"""

import warnings
from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import ResponseShapeWarning
from ..logging import get_logger
from ..types import ProviderResponse

logger = get_logger(__name__)

NO_RESPONSE_PLACEHOLDER = "No response generated"


class BaseLLMClient(ABC):
    """Abstract base class for all provider clients.

    Each client is responsible for:
    1. Building the provider request from a fully composed prompt
    2. Making the API call within the configured timeout
    3. Mapping SDK errors to the engine's exception hierarchy
    4. Extracting the generated text, degrading to a placeholder when the
       response does not have the expected shape
    """

    provider_name: str = "unknown"

    def __init__(
        self,
        api_key: str,
        model: str,
        client_config: dict | None = None,
        timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: API key for the provider
            model: Model name to use
            client_config: Optional generation parameters
                           (temperature, max_tokens)
            timeout: Request timeout in seconds
        """
        self.model = model
        self.client_config = client_config or {}
        self.timeout = timeout

    def complete(self, prompt: str) -> ProviderResponse:
        """Send a prompt as a single user message and return the text.

        Args:
            prompt: Fully composed prompt (system prompt already included)

        Returns:
            ProviderResponse with the generated text

        Raises:
            AuthenticationError: If the API key is rejected
            ProviderCallError: If the call fails or returns a non-success status
        """
        response = self._call(prompt)
        return self._to_provider_response(response)

    @abstractmethod
    def _call(self, prompt: str) -> Any:
        """Make the API call and return the raw SDK response.

        Implementations must translate SDK exceptions into
        AuthenticationError / ProviderCallError subclasses.
        """

    @abstractmethod
    def _extract_text(self, response: Any) -> str | None:
        """Pull the generated text out of a raw response.

        May raise AttributeError, IndexError, KeyError or TypeError when the
        response does not have the expected shape.
        """

    def _to_provider_response(self, response: Any) -> ProviderResponse:
        try:
            text = self._extract_text(response)
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            detail = f"unexpected {self.provider_name} response shape: {type(e).__name__}: {e}"
            logger.warning(detail)
            warnings.warn(detail, ResponseShapeWarning, stacklevel=3)
            return ProviderResponse(text=NO_RESPONSE_PLACEHOLDER, degraded=True, detail=detail)

        if not text:
            logger.info(f"{self.provider_name} returned no text for model {self.model}")
            return ProviderResponse(text=NO_RESPONSE_PLACEHOLDER, detail="empty response")

        return ProviderResponse(text=text)

    @property
    def temperature(self) -> float | None:
        return self.client_config.get("temperature")

    @property
    def max_tokens(self) -> int:
        return self.client_config.get("max_tokens", 4096)
