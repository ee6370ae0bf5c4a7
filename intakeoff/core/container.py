from __future__ import annotations

from typing import Any, Callable, Dict, Type, TypeVar

from .exceptions import ConfigurationError, ServiceNotFoundError

T = TypeVar("T")

__all__ = ["ServiceContainer", "global_container"]


class ServiceContainer:
    """Light-weight dependency-injection container.

    Services are keyed by type. A binding is either a ready instance or a
    zero-argument factory that is invoked once, on first resolution; both
    lifetimes end up as singletons for the life of the container.
    """

    def __init__(self) -> None:  # noqa: D401
        self._factories: Dict[Type[Any], Callable[[], Any]] = {}
        self._singletons: Dict[Type[Any], Any] = {}

    # ---------------------------------------------------------------------
    # Registration helpers
    # ---------------------------------------------------------------------
    def register_factory(self, interface: Type[T], factory: Callable[[], T]) -> None:
        """Register *factory* to build the singleton for *interface* lazily."""
        if not callable(factory):
            raise ConfigurationError(f"Factory for {interface.__name__} is not callable")
        self._singletons.pop(interface, None)
        self._factories[interface] = factory

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """Bind an already-created *instance* as singleton for *interface*."""
        if not isinstance(instance, interface):  # type: ignore[arg-type]
            raise ConfigurationError(
                f"Instance of {type(instance).__name__} does not implement {interface.__name__}"
            )
        self._factories.pop(interface, None)
        self._singletons[interface] = instance

    # ------------------------------------------------------------------
    # Resolution helpers
    # ------------------------------------------------------------------
    def resolve(self, interface: Type[T]) -> T:
        """Return the singleton bound to *interface*."""
        if interface in self._singletons:
            return self._singletons[interface]  # type: ignore[return-value]

        if interface not in self._factories:
            raise ServiceNotFoundError(f"Service {interface.__name__} not registered")

        instance = self._factories[interface]()
        if not isinstance(instance, interface):  # type: ignore[arg-type]
            raise ConfigurationError(
                f"Factory for {interface.__name__} returned {type(instance).__name__}"
            )
        self._singletons[interface] = instance
        return instance

    def __contains__(self, interface: object) -> bool:
        return interface in self._singletons or interface in self._factories


# Process-wide container populated by ``intakeoff.core.bootstrap``.

global_container = ServiceContainer()
