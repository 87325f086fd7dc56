"""The dependency-injection container."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from objectdi.collection import ObjectsCollection
from objectdi.dependencies import has_init_dependencies, inject_dependencies
from objectdi.dependencies import invoke_with_dependencies as _invoke
from objectdi.factory import Factory
from objectdi.interfaces import (
    DefaultInstanceFactory,
    InstanceFactory,
    Injector,
    ResolutionError,
    Resolver,
)
from objectdi.lifetimes import CustomFactoryLifetime, InstanceLifetime, LifetimeHandler

_DEFAULT_INSTANCE_FACTORY = DefaultInstanceFactory()


@dataclass(frozen=True, eq=False)
class _Registration:
    effective_class: type
    lifetime: LifetimeHandler


def _resolve_from_context(context: Any, type_: type) -> Any:
    return context.resolve(type_)


class ObjectContainer(Resolver, Injector):
    """Resolves registered types and injects dependencies into objects.

    A container may have a parent: types missing here are looked up there,
    and registrations here take priority over the parent's.  Containers are
    normally produced by ObjectContainerBuilder.
    """

    def __init__(self, outer: Any = None, parent: ObjectContainer | None = None) -> None:
        self.outer = outer
        self.parent = parent
        self._outer_for_new_objects: Any = None
        self._registrations: dict[type, list[_Registration]] = {}
        self._instance_factories: list[InstanceFactory] = []

        own = InstanceLifetime(self)
        self._add_registration(Resolver, type(self), own)
        self._add_registration(Injector, type(self), own)

    # registration and setup, driven by the builder

    def _add_registration(
        self, interface: type, effective_class: type, lifetime: LifetimeHandler
    ) -> _Registration:
        registration = _Registration(effective_class, lifetime)
        self._registrations.setdefault(interface, []).append(registration)
        return registration

    def _init_services(self) -> None:
        self._instance_factories = [
            self._resolve_impl(registration, self)
            for registration in self._registrations.get(InstanceFactory, ())
        ]

    # lookup helpers

    def _find(self, type_: type) -> tuple[_Registration, ObjectContainer] | None:
        registrations = self._registrations.get(type_)
        if registrations:
            return registrations[-1], self
        if self.parent is not None:
            return self.parent._find(type_)
        return None

    def _custom_instance_factory(self, cls: type) -> InstanceFactory | None:
        for factory in reversed(self._instance_factories):
            if factory.is_class_supported(cls):
                return factory
        if self.parent is not None:
            return self.parent._custom_instance_factory(cls)
        return None

    def _find_instance_factory(self, cls: type) -> InstanceFactory:
        return self._custom_instance_factory(cls) or _DEFAULT_INSTANCE_FACTORY

    def _effective_outer(self) -> Any:
        if self._outer_for_new_objects is not None:
            return self._outer_for_new_objects
        if self.parent is not None:
            return self.parent._effective_outer()
        return self.outer

    def _resolve_impl(self, registration: _Registration, owner: ObjectContainer) -> Any:
        lifetime = registration.lifetime
        obj = lifetime.get()
        if obj is not None:
            if isinstance(lifetime, CustomFactoryLifetime):
                inject_dependencies(obj, owner)
            return obj

        cls = registration.effective_class
        factory = self._find_instance_factory(cls)
        obj = factory.create(self._effective_outer(), cls)
        inject_dependencies(obj, owner)
        factory.finalize_creation(obj)
        lifetime.set(obj)
        return obj

    def _collect(self, type_: type) -> list[Any] | None:
        inherited = self.parent._collect(type_) if self.parent is not None else None
        registrations = self._registrations.get(type_)
        if inherited is None and not registrations:
            return None
        objects = list(inherited or ())
        objects.extend(self._resolve_impl(r, self) for r in registrations or ())
        return objects

    # Resolver

    def resolve(self, type_: type) -> Any:
        found = self._find(type_)
        if found is None:
            raise ResolutionError(f"Type {type_!r} is not registered")
        return self._resolve_impl(*found)

    def resolve_all(self, type_: type) -> ObjectsCollection:
        objects = self._collect(type_)
        if objects is None:
            raise ResolutionError(f"Type {type_!r} is not registered")
        return ObjectsCollection(objects)

    def resolve_factory(self, type_: type) -> Factory:
        if not self.is_registered(type_):
            raise ResolutionError(f"Type {type_!r} is not registered")
        return Factory(self, _resolve_from_context, type_)

    def try_resolve(self, type_: type) -> Any:
        found = self._find(type_)
        return None if found is None else self._resolve_impl(*found)

    def try_resolve_all(self, type_: type) -> ObjectsCollection:
        return ObjectsCollection(self._collect(type_))

    def try_resolve_factory(self, type_: type) -> Factory:
        if not self.is_registered(type_):
            return Factory()
        return Factory(self, _resolve_from_context, type_)

    def is_registered(self, type_: type) -> bool:
        return self._find(type_) is not None

    # Injector

    def inject(self, obj: Any) -> bool:
        if obj is None or not self.can_inject(type(obj)):
            return False
        inject_dependencies(obj, self)
        return True

    def can_inject(self, cls: type) -> bool:
        return isinstance(cls, type) and has_init_dependencies(cls)

    def invoke_with_dependencies(self, function: Callable[..., Any]) -> Any:
        """Call ``function`` with its annotated parameters resolved from here."""
        return _invoke(self, function)