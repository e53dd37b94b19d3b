"""Provider client implementations.

All clients implement the BaseLLMClient interface. Vendor SDKs are loaded
lazily through the factory, so only the providers in use need their
credentials configured.
"""

from .base import NO_RESPONSE_PLACEHOLDER, BaseLLMClient
from .factory import create_client, get_available_providers, get_default_model

__all__ = [
    "BaseLLMClient",
    "NO_RESPONSE_PLACEHOLDER",
    "create_client",
    "get_available_providers",
    "get_default_model",
]
