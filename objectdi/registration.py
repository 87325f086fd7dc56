"""Registration configurators used while building a container.

Each ``register_*`` call on the builder produces one configurator.  It
records the implementation class, the types the registration can be
resolved as, the class to instantiate and the lifetime policy.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from objectdi.interfaces import is_interface
from objectdi.lifetimes import (
    CustomFactoryLifetime,
    InstanceLifetime,
    LifetimeHandler,
    SingleInstanceLifetime,
    StaticFactoryLifetime,
    TransientLifetime,
    WeakSingleInstanceLifetime,
)

_defaults: dict[type, Any] = {}


def get_default(cls: type) -> Any:
    """Return the shared default object of ``cls``, creating it on first use."""
    try:
        return _defaults[cls]
    except KeyError:
        default = _defaults[cls] = cls()
        return default


class RegistrationConfigurator(ABC):
    """Common part of every registration.

    ``interface_types`` lists the types the registration is resolvable as,
    in the order they were added and without duplicates.
    """

    def __init__(self, impl_class: type) -> None:
        if not isinstance(impl_class, type):
            raise TypeError(f"{impl_class!r} is not a class")
        self.impl_class = impl_class
        self.interface_types: list[type] = []
        self.effective_class: type = impl_class
        self.auto_create = False

    def _add_type(self, type_: type) -> None:
        if type_ not in self.interface_types:
            self.interface_types.append(type_)

    def as_type(self, interface: type) -> RegistrationConfigurator:
        """Make the registration resolvable as ``interface``."""
        if not isinstance(interface, type) or not issubclass(self.impl_class, interface):
            raise TypeError(
                f"{self.impl_class.__name__} must be derived from {interface!r}"
            )
        self._add_type(interface)
        return self

    def as_self(self) -> RegistrationConfigurator:
        """Make the registration resolvable as its implementation class."""
        self._add_type(self.impl_class)
        return self

    def by_interfaces(self) -> RegistrationConfigurator:
        """Make the registration resolvable as every interface it implements."""
        for base in self.impl_class.__mro__[1:]:
            if is_interface(base):
                self._add_type(base)
        return self

    @abstractmethod
    def create_lifetime_handler(self) -> LifetimeHandler:
        """Return a new lifetime handler for this registration."""


class TypeRegistration(RegistrationConfigurator):
    """Objects are created by the container; transient unless told otherwise."""

    def __init__(self, impl_class: type) -> None:
        if is_interface(impl_class):
            raise TypeError(
                f"{impl_class.__name__} is an interface; register an implementation"
            )
        super().__init__(impl_class)
        self._lifetime_factory: Callable[[], LifetimeHandler] = TransientLifetime

    def single_instance(self, auto_create: bool = False) -> TypeRegistration:
        """Create one object and keep it; with ``auto_create`` create it at build."""
        self._lifetime_factory = SingleInstanceLifetime
        self.auto_create = auto_create
        return self

    def weak_single_instance(self) -> TypeRegistration:
        """Share one object without keeping it alive."""
        self._lifetime_factory = WeakSingleInstanceLifetime
        return self

    def from_subclass(self, cls: type | None) -> TypeRegistration:
        """Instantiate ``cls`` instead of the registered class."""
        if cls is None:
            raise ValueError("A subclass is required")
        if not isinstance(cls, type) or not issubclass(cls, self.impl_class):
            raise TypeError(
                f"{cls!r} is not a subclass of {self.impl_class.__name__}"
            )
        self.effective_class = cls
        return self

    def create_lifetime_handler(self) -> LifetimeHandler:
        return self._lifetime_factory()


class InstanceRegistration(RegistrationConfigurator):
    """Always resolves to the given object."""

    def __init__(self, instance: Any) -> None:
        if instance is None:
            raise ValueError("An instance is required")
        super().__init__(type(instance))
        self.instance = instance

    def create_lifetime_handler(self) -> LifetimeHandler:
        return InstanceLifetime(self.instance)


class _SharedFactoryLifetime(LifetimeHandler):
    """Calls a factory once and reuses its result, strongly or weakly held."""

    def __init__(self, factory: Callable[[], Any], weak: bool) -> None:
        self._factory = factory
        self._weak = weak
        self._held: Any = None

    def _current(self) -> Any:
        if self._held is None:
            return None
        return self._held() if self._weak else self._held

    def get(self) -> Any:
        obj = self._current()
        if obj is None:
            obj = self._factory()
            self.set(obj)
        return obj

    def set(self, obj: Any) -> None:
        if obj is None:
            self._held = None
        else:
            self._held = weakref.ref(obj) if self._weak else obj


class FactoryRegistration(RegistrationConfigurator):
    """Objects come from a user-supplied callable taking no arguments."""

    def __init__(self, impl_class: type, factory: Callable[[], Any]) -> None:
        if not callable(factory):
            raise TypeError(f"{factory!r} is not callable")
        super().__init__(impl_class)
        self.factory = factory
        self._shared: bool = False
        self._weak: bool = False

    def single_instance(self, auto_create: bool = False) -> FactoryRegistration:
        """Call the factory once and keep its result."""
        self._shared = True
        self._weak = False
        self.auto_create = auto_create
        return self

    def weak_single_instance(self) -> FactoryRegistration:
        """Reuse the factory's result while something else keeps it alive."""
        self._shared = True
        self._weak = True
        return self

    def create_lifetime_handler(self) -> LifetimeHandler:
        if self._shared:
            return _SharedFactoryLifetime(self.factory, self._weak)
        return CustomFactoryLifetime(self.factory)


class DefaultRegistration(RegistrationConfigurator):
    """Resolves to the shared default object of the class."""

    def __init__(self, impl_class: type) -> None:
        super().__init__(impl_class)

    def create_lifetime_handler(self) -> LifetimeHandler:
        impl_class = self.impl_class
        return StaticFactoryLifetime(lambda: get_default(impl_class))