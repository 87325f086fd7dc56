import gc

import pytest

from objectdi.lifetimes import (
    CustomFactoryLifetime,
    InstanceLifetime,
    LifetimeHandler,
    SingleInstanceLifetime,
    StaticFactoryLifetime,
    TransientLifetime,
    WeakSingleInstanceLifetime,
)


class Thing:
    pass


def test_base_is_abstract():
    with pytest.raises(TypeError):
        LifetimeHandler()


def test_transient_never_keeps_objects():
    handler = TransientLifetime()
    handler.set(Thing())
    assert handler.get() is None


def test_static_factory_calls_function_each_time():
    handler = StaticFactoryLifetime(Thing)
    first = handler.get()
    second = handler.get()
    assert isinstance(first, Thing)
    assert first is not second


def test_static_factory_returning_shared_default():
    shared = Thing()
    handler = StaticFactoryLifetime(lambda: shared)
    handler.set(Thing())
    assert handler.get() is shared


def test_custom_factory_uses_callable():
    made = []

    def make():
        obj = Thing()
        made.append(obj)
        return obj

    handler = CustomFactoryLifetime(make)
    result = handler.get()
    assert made == [result]


def test_instance_returns_given_object():
    instance = Thing()
    handler = InstanceLifetime(instance)
    handler.set(Thing())
    assert handler.get() is instance


def test_single_instance_keeps_object_alive():
    handler = SingleInstanceLifetime()
    assert handler.get() is None
    obj = Thing()
    handler.set(obj)
    obj_id = id(obj)
    del obj
    gc.collect()
    assert id(handler.get()) == obj_id
    assert isinstance(handler.get(), Thing)


def test_weak_single_instance_returns_object_while_alive():
    handler = WeakSingleInstanceLifetime()
    assert handler.get() is None
    obj = Thing()
    handler.set(obj)
    assert handler.get() is obj


def test_weak_single_instance_forgets_collected_object():
    handler = WeakSingleInstanceLifetime()
    obj = Thing()
    handler.set(obj)
    del obj
    gc.collect()
    assert handler.get() is None


def test_weak_single_instance_set_none_clears():
    handler = WeakSingleInstanceLifetime()
    obj = Thing()
    handler.set(obj)
    handler.set(None)
    assert handler.get() is None