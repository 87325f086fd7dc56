import pytest

from objectdi.injection import (
    InjectOnConstruction,
    clear_container_for_world,
    get_container_for_world,
    set_container_for_world,
)
from objectdi.interfaces import InjectorProvider


class World:
    pass


class FakeContainer:
    def __init__(self, provider=None):
        self.provider = provider

    def try_resolve(self, type_):
        if type_ is InjectorProvider:
            return self.provider
        return None

    def inject(self, obj):
        obj.resolver = self
        return True


class FixedInjectorProvider(InjectorProvider):
    def __init__(self, injector):
        self.injector = injector

    def get_injector(self, target):
        return self.injector


class InjectedObject(InjectOnConstruction):
    def __init__(self, world):
        self.resolver = None
        self.injected = self.try_init_dependencies(world)


@pytest.fixture
def world():
    instance = World()
    yield instance
    clear_container_for_world(instance)


def test_set_container_for_world(world):
    container = FakeContainer()
    set_container_for_world(world, container)
    assert get_container_for_world(world) is container


def test_reset_container_for_world(world):
    first, second = FakeContainer(), FakeContainer()
    set_container_for_world(world, first)
    set_container_for_world(world, second)
    assert get_container_for_world(world) is second


def test_clear_container_for_world(world):
    set_container_for_world(world, FakeContainer())
    clear_container_for_world(world)
    assert get_container_for_world(world) is None


def test_unknown_world_has_no_container(world):
    assert get_container_for_world(world) is None


def test_none_world_has_no_container():
    assert get_container_for_world(None) is None


def test_worlds_are_independent(world):
    other = World()
    container = FakeContainer()
    set_container_for_world(world, container)
    assert get_container_for_world(other) is None
    assert get_container_for_world(world) is container


def test_injects_from_world_container(world):
    container = FakeContainer()
    set_container_for_world(world, container)
    obj = InjectedObject(world)
    assert obj.injected is True
    assert obj.resolver is container


def test_no_injection_without_container(world):
    obj = InjectedObject(world)
    assert obj.injected is False
    assert obj.resolver is None


def test_uses_custom_injector_provider(world):
    other = FakeContainer()
    container = FakeContainer(FixedInjectorProvider(other))
    set_container_for_world(world, container)
    obj = InjectedObject(world)
    assert obj.resolver is other


def test_provider_without_injector_skips_injection(world):
    container = FakeContainer(FixedInjectorProvider(None))
    set_container_for_world(world, container)
    obj = InjectedObject(world)
    assert obj.injected is False
    assert obj.resolver is None