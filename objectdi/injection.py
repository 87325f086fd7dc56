"""Injection into objects at construction time from a world-bound container."""

from __future__ import annotations

from typing import Any

from objectdi.interfaces import InjectorProvider

_containers: dict[Any, Any] = {}


def set_container_for_world(world: Any, container: Any) -> None:
    """Assign ``container`` to ``world``, replacing any previous one."""
    _containers[world] = container


def clear_container_for_world(world: Any) -> None:
    """Forget the container assigned to ``world``, if any."""
    _containers.pop(world, None)


def get_container_for_world(world: Any) -> Any:
    """Return the container of ``world``, or None if there is none."""
    if world is None:
        return None
    return _containers.get(world)


class InjectOnConstruction:
    """Mixin for objects that receive dependencies when they are constructed.

    Call ``self.try_init_dependencies(world)`` from ``__init__`` after
    assigning a container to the world with ``set_container_for_world``.
    """

    def try_init_dependencies(self, world: Any) -> bool:
        """Inject from the world's container; return True if injection happened."""
        container = get_container_for_world(world)
        if container is None:
            return False

        provider = container.try_resolve(InjectorProvider)
        injector = provider.get_injector(self) if provider is not None else container
        if injector is None:
            return False
        return bool(injector.inject(self))