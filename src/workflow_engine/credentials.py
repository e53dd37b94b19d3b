"""Provider credential lookup."""

import threading

from .config import Settings, get_settings
from .types import Provider


class CredentialStore:
    """In-memory API key lookup per provider.

    Keys are seeded from settings (environment / .env) and can be replaced
    at runtime. Nothing is persisted.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self._lock = threading.Lock()
        self._keys: dict[Provider, str] = {
            provider: settings.get_api_key_for_provider(provider.value) or ""
            for provider in Provider
        }

    def get(self, provider: Provider | str) -> str:
        """Get the key for a provider; empty string when unset."""
        with self._lock:
            return self._keys.get(Provider(provider), "")

    def set(self, provider: Provider | str, api_key: str) -> None:
        """Replace the key for a provider."""
        with self._lock:
            self._keys[Provider(provider)] = api_key

    def configured_providers(self) -> list[Provider]:
        """Providers that currently have a non-empty key."""
        with self._lock:
            return [p for p, key in self._keys.items() if key]
