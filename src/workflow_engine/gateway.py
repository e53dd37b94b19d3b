"""Provider gateway.

Single entry point used by the workflow drivers to send a fully composed
prompt to the provider configured on an agent.
"""

import time
from typing import Callable

from .clients.base import BaseLLMClient
from .clients.factory import create_client
from .credentials import CredentialStore
from .exceptions import AuthenticationError
from .logging import get_logger
from .types import Agent, ProviderResponse

logger = get_logger(__name__)

ClientFactory = Callable[..., BaseLLMClient]


class ProviderGateway:
    """Dispatches prompts to provider clients by ``agent.provider``.

    The gateway does no prompt composition: the caller passes the exact text
    to send. Authentication and call failures raise; a response whose shape
    is unexpected comes back as a degraded ProviderResponse instead.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        timeout: float | None = None,
        client_factory: ClientFactory = create_client,
    ):
        """Initialize the gateway.

        Args:
            credentials: API key lookup per provider.
            timeout: Per-call deadline in seconds passed to every client.
            client_factory: Callable building a client; defaults to create_client.
        """
        self.credentials = credentials
        self.timeout = timeout
        self._client_factory = client_factory

    def send(self, agent: Agent, prompt: str) -> ProviderResponse:
        """Send a prompt under an agent's provider, model and sampling settings.

        Args:
            agent: Agent whose provider/model/temperature/max_tokens are used.
            prompt: Fully composed prompt.

        Returns:
            ProviderResponse with the generated text.

        Raises:
            AuthenticationError: If no credential is configured for the provider
                (raised before any network attempt) or the key is rejected.
            ProviderCallError: If the provider call fails.
        """
        api_key = self.credentials.get(agent.provider)
        if not api_key:
            raise AuthenticationError(f"API key not found for provider: {agent.provider.value}")

        client = self._client_factory(
            agent.provider,
            api_key=api_key,
            model=agent.model,
            client_config={
                "temperature": agent.temperature,
                "max_tokens": agent.max_tokens,
            },
            timeout=self.timeout,
        )

        logger.debug(f"sending {len(prompt)} chars to {agent.provider.value}/{agent.model} for {agent.id}")
        start = time.monotonic()
        response = client.complete(prompt)
        logger.info(
            f"{agent.id} ({agent.provider.value}/{agent.model}) responded in "
            f"{time.monotonic() - start:.2f}s"
        )
        return response
