"""Service interfaces of the container and their default implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from objectdi.collection import ObjectsCollection
    from objectdi.factory import Factory


class ResolutionError(LookupError):
    """Raised when a requested type cannot be resolved."""


class Interface(ABC):
    """Base for resolvable interfaces.

    A class is an interface when it lists ``Interface`` among its direct
    bases; classes that merely implement an interface are not interfaces.
    """


def is_interface(cls: Any) -> bool:
    """Return True if ``cls`` is declared as an interface."""
    return isinstance(cls, type) and Interface in cls.__bases__


class Resolver(Interface):
    """Resolves objects by type."""

    @abstractmethod
    def resolve(self, type_: type) -> Any:
        """Return an instance of ``type_``; raise ResolutionError if unregistered."""

    @abstractmethod
    def resolve_all(self, type_: type) -> ObjectsCollection:
        """Return all instances of ``type_``; raise ResolutionError if unregistered."""

    @abstractmethod
    def resolve_factory(self, type_: type) -> Factory:
        """Return a factory for ``type_``; raise ResolutionError if unregistered."""

    @abstractmethod
    def try_resolve(self, type_: type) -> Any:
        """Return an instance of ``type_`` or None if it is not registered."""

    @abstractmethod
    def try_resolve_all(self, type_: type) -> ObjectsCollection:
        """Return all instances of ``type_`` or an invalid collection."""

    @abstractmethod
    def try_resolve_factory(self, type_: type) -> Factory:
        """Return a factory for ``type_`` or an invalid factory."""

    @abstractmethod
    def is_registered(self, type_: type) -> bool:
        """Return True if ``type_`` can be resolved."""


class Injector(Interface):
    """Injects dependencies into objects that already exist."""

    @abstractmethod
    def inject(self, obj: Any) -> bool:
        """Inject into ``obj``; return False if its class is not registered."""

    @abstractmethod
    def can_inject(self, cls: type) -> bool:
        """Return True if objects of ``cls`` can receive injection."""


class InjectorProvider(Interface):
    """Chooses the injector to use for a given object."""

    @abstractmethod
    def get_injector(self, target: Any) -> Injector | None:
        """Return the injector that should serve ``target``."""


class InstanceFactory(Interface):
    """Creates objects of given classes.

    When several factories are registered, the last registered one that
    supports a class is used, and custom ones take priority over the default.
    """

    @abstractmethod
    def is_class_supported(self, cls: type) -> bool:
        """Return True if this factory can create objects of ``cls``."""

    @abstractmethod
    def create(self, outer: Any, cls: type) -> Any:
        """Create an object of ``cls`` with minimal initialization."""

    @abstractmethod
    def finalize_creation(self, obj: Any) -> None:
        """Finish initialization after dependencies have been injected."""


class DefaultInstanceFactory(InstanceFactory):
    """Creates any concrete class by calling it without arguments.

    The new object's ``outer`` attribute is set to the given outer.  After
    injection, the object's ``finish_creation()`` method is called if it has one.
    """

    def is_class_supported(self, cls: type) -> bool:
        return isinstance(cls, type) and not is_interface(cls)

    def create(self, outer: Any, cls: type) -> Any:
        obj = cls()
        obj.outer = outer
        return obj

    def finalize_creation(self, obj: Any) -> None:
        finish = getattr(obj, "finish_creation", None)
        if callable(finish):
            finish()


class DefaultInjectorProvider(InjectorProvider):
    """Provides the injector of the container that created it."""

    def __init__(self) -> None:
        self._injector: Injector | None = None

    def init_dependencies(self, injector: Injector) -> None:
        self._injector = injector

    def get_injector(self, target: Any) -> Injector | None:
        return self._injector