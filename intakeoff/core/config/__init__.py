"""Settings model and the service that wraps it; wiring lives in ``core.bootstrap``."""

from .settings import ApplicationSettings
from .configuration_service import ConfigurationService

__all__ = ["ApplicationSettings", "ConfigurationService"]
