"""Lifetime policies that decide when a registration creates a new object."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class LifetimeHandler(ABC):
    """Keeps (or does not keep) objects produced for one registration.

    ``get`` returns an existing object, or None when a new one must be
    created; ``set`` is told about every newly created object.
    """

    @abstractmethod
    def get(self) -> Any:
        """Return the object to reuse, or None if a new one is needed."""

    @abstractmethod
    def set(self, obj: Any) -> None:
        """Record a newly created object."""


class TransientLifetime(LifetimeHandler):
    """A new object every time."""

    def get(self) -> Any:
        return None

    def set(self, obj: Any) -> None:
        pass


class StaticFactoryLifetime(LifetimeHandler):
    """Objects come from a plain function taking no arguments."""

    def __init__(self, factory: Callable[[], Any]) -> None:
        self._factory = factory

    def get(self) -> Any:
        return self._factory()

    def set(self, obj: Any) -> None:
        pass


class CustomFactoryLifetime(LifetimeHandler):
    """Objects come from a user-supplied callable."""

    def __init__(self, factory: Callable[[], Any]) -> None:
        self._factory = factory

    def get(self) -> Any:
        return self._factory()

    def set(self, obj: Any) -> None:
        pass


class InstanceLifetime(LifetimeHandler):
    """Always the same, externally supplied object."""

    def __init__(self, instance: Any) -> None:
        self._instance = instance

    def get(self) -> Any:
        return self._instance

    def set(self, obj: Any) -> None:
        pass


class SingleInstanceLifetime(LifetimeHandler):
    """One object, created on demand and kept alive by the handler."""

    def __init__(self) -> None:
        self._instance: Any = None

    def get(self) -> Any:
        return self._instance

    def set(self, obj: Any) -> None:
        self._instance = obj


class WeakSingleInstanceLifetime(LifetimeHandler):
    """One object at a time, held weakly; recreated once it is collected."""

    def __init__(self) -> None:
        self._ref: weakref.ref | None = None

    def get(self) -> Any:
        return None if self._ref is None else self._ref()

    def set(self, obj: Any) -> None:
        self._ref = None if obj is None else weakref.ref(obj)