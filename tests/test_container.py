import pytest

from intakeoff.core.container import ServiceContainer
from intakeoff.core.exceptions import ConfigurationError, ServiceNotFoundError


class Dummy:
    pass


def test_register_and_resolve_singleton():
    container = ServiceContainer()
    calls = []
    container.register_factory(Dummy, lambda: calls.append(1) or Dummy())

    inst1 = container.resolve(Dummy)
    inst2 = container.resolve(Dummy)

    assert isinstance(inst1, Dummy)
    assert inst1 is inst2
    assert calls == [1]


def test_register_instance_type_checked():
    container = ServiceContainer()
    with pytest.raises(ConfigurationError):
        container.register_instance(Dummy, object())


def test_resolve_unregistered():
    container = ServiceContainer()
    assert Dummy not in container
    with pytest.raises(ServiceNotFoundError):
        container.resolve(Dummy)


def test_factory_returning_wrong_type():
    container = ServiceContainer()
    container.register_factory(Dummy, lambda: "not a dummy")
    with pytest.raises(ConfigurationError):
        container.resolve(Dummy)
