from __future__ import annotations

"""Application bootstrap helper.

Importing this module wires up:
• ConfigurationService built from ApplicationSettings
• TemplateRegistry built from the built-ins plus the optional prompt store
• IntakeOffClient configured from settings

After import you can fetch the container via :pydata:`container` and resolve
any registered singletons:

>>> from intakeoff.core.bootstrap import container
>>> registry = container.resolve(TemplateRegistry)
"""

import logging

from .config import ApplicationSettings, ConfigurationService
from .container import global_container as container
from .interfaces.config_service import IConfigurationService
from ..prompts.templates import TemplateRegistry, default_registry
from ..sdk.client import IntakeOffClient

logger = logging.getLogger("intakeoff")


def build_template_registry(config: IConfigurationService) -> TemplateRegistry:
    """Return the process registry: built-ins plus ``prompt_store`` if set."""
    store = config.get("prompt_store")
    if store is None:
        return default_registry
    return TemplateRegistry.from_json(store, base=default_registry)


if IConfigurationService not in container:
    container.register_instance(
        IConfigurationService, ConfigurationService(settings=ApplicationSettings())
    )

if TemplateRegistry not in container:
    container.register_factory(
        TemplateRegistry,
        lambda: build_template_registry(container.resolve(IConfigurationService)),
    )

if IntakeOffClient not in container:
    container.register_factory(
        IntakeOffClient,
        lambda: IntakeOffClient.from_config(container.resolve(IConfigurationService)),
    )

logger.debug("Service container bootstrapped")

__all__ = ["container", "build_template_registry"]
