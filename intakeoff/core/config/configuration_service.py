from __future__ import annotations

from typing import Any

from ..exceptions import ConfigurationError
from ..interfaces.config_service import IConfigurationService
from .settings import ApplicationSettings

__all__ = ["ConfigurationService"]


class ConfigurationService(IConfigurationService):
    """Runtime wrapper around :class:`ApplicationSettings`."""

    def __init__(self, *, settings: ApplicationSettings) -> None:
        self._settings = settings
        if not self.validate_configuration():
            raise ConfigurationError("Invalid application configuration detected")

    # ------------------------------------------------------------------
    # IConfigurationService implementation
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:  # noqa: D401
        current: Any = self._settings
        for part in key.split("."):
            if hasattr(current, part):
                current = getattr(current, part)
            else:
                return default
        return current

    def validate_configuration(self) -> bool:  # noqa: D401
        port = self._settings.port
        if not 0 < port < 65536:
            raise ConfigurationError(
                f"Port {port} is out of range", context={"port": port}
            )

        store = self._settings.prompt_store
        if store is not None and not store.is_file():
            raise ConfigurationError(
                f"Prompt store {store} does not exist", context={"prompt_store": str(store)}
            )
        return True
