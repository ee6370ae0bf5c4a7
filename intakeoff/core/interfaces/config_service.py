from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import ConfigurationError

__all__ = ["IConfigurationService"]

_MISSING = object()


class IConfigurationService(ABC):
    """Read access to application settings by dotted key."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:  # noqa: D401
        """Look up *key* (``"a.b"`` walks nested settings); *default* if absent."""

    @abstractmethod
    def validate_configuration(self) -> bool:  # noqa: D401
        """Raise ``ConfigurationError`` for unusable settings, else return *True*."""

    def require(self, key: str) -> Any:
        """Like :meth:`get` but a missing or ``None`` value is a ``ConfigurationError``."""
        value = self.get(key, _MISSING)
        if value is _MISSING or value is None:
            raise ConfigurationError(f"Missing required setting '{key}'", context={"key": key})
        return value
