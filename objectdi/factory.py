"""Deferred resolution of a type through a live container."""

from __future__ import annotations

import weakref
from collections.abc import Callable
from typing import Any


class FactoryError(RuntimeError):
    """Raised when an unusable factory is invoked."""


FactoryFunction = Callable[[Any, type], Any]


class Factory:
    """Callable that resolves ``requested_type`` from a context object.

    The context (normally the container that produced the factory) is held
    weakly, so a factory never keeps its container alive.
    """

    __slots__ = ("_context_ref", "_factory_function", "requested_type")

    def __init__(
        self,
        context: Any = None,
        factory_function: FactoryFunction | None = None,
        requested_type: type | None = None,
    ) -> None:
        self._context_ref = None if context is None else weakref.ref(context)
        self._factory_function = factory_function
        self.requested_type = requested_type

    def __call__(self) -> Any:
        """Resolve a new object; raise FactoryError if the factory is unusable."""
        if self._factory_function is None:
            raise FactoryError("Factory is not initialized")
        context = None if self._context_ref is None else self._context_ref()
        if context is None:
            raise FactoryError("Factory invoked after its container was destroyed")
        return self._factory_function(context, self.requested_type)

    def is_valid(self) -> bool:
        """Return True if the factory has a function and its context is alive."""
        return (
            self._factory_function is not None
            and self._context_ref is not None
            and self._context_ref() is not None
        )

    def __bool__(self) -> bool:
        return self.is_valid()