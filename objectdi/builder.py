"""Builder that collects registrations and produces containers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from objectdi.container import ObjectContainer
from objectdi.registration import (
    DefaultRegistration,
    FactoryRegistration,
    InstanceRegistration,
    RegistrationConfigurator,
    TypeRegistration,
)


class ObjectContainerBuilder:
    """Collects registrations, then builds a container from them.

    A registration that names no type to be resolved as is resolvable as
    its own class.
    """

    def __init__(self) -> None:
        self._registrations: list[RegistrationConfigurator] = []
        self._outer_for_new_objects: Any = None

    def _add(self, registration: RegistrationConfigurator) -> Any:
        self._registrations.append(registration)
        return registration

    def register_type(self, cls: type) -> TypeRegistration:
        """Register ``cls`` to be created by the container (transient by default)."""
        return self._add(TypeRegistration(cls))

    def register_instance(self, instance: Any) -> InstanceRegistration:
        """Register an existing object."""
        return self._add(InstanceRegistration(instance))

    def register_factory(
        self, cls: type, factory: Callable[[], Any]
    ) -> FactoryRegistration:
        """Register ``cls`` to be produced by ``factory``."""
        return self._add(FactoryRegistration(cls, factory))

    def register_default(self, cls: type) -> DefaultRegistration:
        """Register the shared default object of ``cls``."""
        return self._add(DefaultRegistration(cls))

    def build(self, outer: Any = None) -> ObjectContainer:
        """Build a container; ``outer`` becomes the owner of new objects."""
        container = ObjectContainer(outer)
        self._populate(container)
        return container

    def build_nested(self, parent: ObjectContainer) -> ObjectContainer:
        """Build a container that falls back to ``parent`` for missing types."""
        container = ObjectContainer(parent, parent)
        self._populate(container)
        return container

    def set_outer_for_new_objects(self, outer: Any) -> None:
        """Override the owner given to objects the container creates."""
        self._outer_for_new_objects = outer

    def _populate(self, container: ObjectContainer) -> None:
        container._outer_for_new_objects = self._outer_for_new_objects

        auto_created = []
        for registration in self._registrations:
            types = registration.interface_types or [registration.impl_class]
            lifetime = registration.create_lifetime_handler()
            entries = [
                container._add_registration(type_, registration.effective_class, lifetime)
                for type_ in types
            ]
            if registration.auto_create:
                auto_created.append(entries[0])

        container._init_services()

        for entry in auto_created:
            container._resolve_impl(entry, container)