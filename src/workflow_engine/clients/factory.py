"""Factory for creating provider clients.

This module provides a centralized way to create clients based on provider
name, using a registry pattern that makes it easy to add new providers.
"""

import importlib
from typing import Any

from ..exceptions import AuthenticationError, ConfigurationError
from ..types import Provider
from .base import BaseLLMClient

# registry of provider configurations
_PROVIDER_REGISTRY: dict[Provider, dict[str, Any]] = {
    Provider.GEMINI: {
        "class_path": "workflow_engine.clients.google.GeminiClient",
        "api_key_env": "GEMINI_API_KEY",
        "default_model": "gemini-flash-latest",
    },
    Provider.OPENAI: {
        "class_path": "workflow_engine.clients.openai.OpenAIClient",
        "api_key_env": "OPENAI_API_KEY",
        "default_model": "gpt-4o",
    },
    Provider.ANTHROPIC: {
        "class_path": "workflow_engine.clients.anthropic.AnthropicClient",
        "api_key_env": "ANTHROPIC_API_KEY",
        "default_model": "claude-sonnet-4-5-20250929",
    },
    Provider.TOGETHER: {
        "class_path": "workflow_engine.clients.together.TogetherClient",
        "api_key_env": "TOGETHER_API_KEY",
        "default_model": "meta-llama/Meta-Llama-3.1-70B-Instruct-Turbo",
    },
}


def get_available_providers() -> list[str]:
    """Get list of available provider names."""
    return [provider.value for provider in _PROVIDER_REGISTRY]


def _resolve(provider: Provider | str) -> tuple[Provider, dict[str, Any]]:
    try:
        resolved = Provider(provider)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown provider: {provider}. Available: {get_available_providers()}"
        ) from e
    return resolved, _PROVIDER_REGISTRY[resolved]


def get_default_model(provider: Provider | str) -> str:
    """Get the default model for a provider.

    Raises:
        ConfigurationError: If provider is unknown.
    """
    _, config = _resolve(provider)
    return config["default_model"]


def get_api_key_env(provider: Provider | str) -> str:
    """Get the environment variable that holds a provider's API key."""
    _, config = _resolve(provider)
    return config["api_key_env"]


def create_client(
    provider: Provider | str,
    api_key: str,
    model: str | None = None,
    client_config: dict | None = None,
    timeout: float | None = None,
) -> BaseLLMClient:
    """Create a client for the specified provider.

    Args:
        provider: The provider (gemini, openai, anthropic, together).
        api_key: API key for the provider. Must not be empty.
        model: Optional model override. If not provided, uses provider default.
        client_config: Optional generation parameters for the client.
        timeout: Optional request timeout in seconds.

    Returns:
        An initialized client instance.

    Raises:
        ConfigurationError: If provider is unknown.
        AuthenticationError: If no API key is given.
    """
    resolved, config = _resolve(provider)

    if not api_key:
        raise AuthenticationError(
            f"API key not found for provider: {resolved.value} "
            f"(set {config['api_key_env']})"
        )

    client_class = _import_client_class(config["class_path"])

    return client_class(
        api_key=api_key,
        model=model or config["default_model"],
        client_config=client_config,
        timeout=timeout,
    )


def _import_client_class(class_path: str) -> type[BaseLLMClient]:
    """Dynamically import a client class from its path.

    Vendor SDKs are only imported when a provider is first used.
    """
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
