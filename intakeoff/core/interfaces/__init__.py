from .config_service import IConfigurationService  # noqa: F401

__all__ = ["IConfigurationService"]
