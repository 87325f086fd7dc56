# objectdi

objectdi is a small dependency injection container. You register types,
existing instances, factory functions or shared default objects with an
`ObjectContainerBuilder`. The builder produces an `ObjectContainer`, and
you resolve objects from it by their class or by an interface they
implement.

## Modules

- `objectdi.builder`: `ObjectContainerBuilder`
- `objectdi.container`: `ObjectContainer`
- `objectdi.registration`: `TypeRegistration`, `InstanceRegistration`,
  `FactoryRegistration`, `DefaultRegistration`, `get_default`
- `objectdi.interfaces`: `Interface`, `is_interface`, `Resolver`,
  `Injector`, `InjectorProvider`, `InstanceFactory`,
  `DefaultInstanceFactory`, `DefaultInjectorProvider`, `ResolutionError`
- `objectdi.lifetimes`: the lifetime handlers (`TransientLifetime`,
  `SingleInstanceLifetime`, `WeakSingleInstanceLifetime`,
  `InstanceLifetime`, `StaticFactoryLifetime`, `CustomFactoryLifetime`)
- `objectdi.dependencies`: resolving annotated parameters
  (`invoke_with_dependencies`, `inject_dependencies`,
  `resolve_dependency`, `is_supported_argument`,
  `dependency_annotations`, `has_init_dependencies`,
  `UnsupportedDependencyError`)
- `objectdi.factory`: `Factory`, `FactoryError`
- `objectdi.collection`: `ObjectsCollection`
- `objectdi.injection`: `InjectOnConstruction`,
  `set_container_for_world`, `get_container_for_world`,
  `clear_container_for_world`

## Installation

```
pip install objectdi
```

## Usage

```python
from objectdi.builder import ObjectContainerBuilder
from objectdi.interfaces import Interface


class Reader(Interface):
    def read(self) -> str:
        raise NotImplementedError


class FileReader(Reader):
    def read(self) -> str:
        return "data"


class Service:
    def init_dependencies(self, reader: Reader) -> None:
        self.reader = reader


builder = ObjectContainerBuilder()
builder.register_type(FileReader).as_type(Reader).single_instance()
builder.register_type(Service)
container = builder.build()

service = container.resolve(Service)
assert service.reader is container.resolve(Reader)
```

### Interfaces

A class is an interface when `Interface` is one of its direct bases. A
class that only implements an interface is not an interface itself.
`by_interfaces()` registers a type under every interface it inherits
from. `register_type` rejects an interface.

### Registrations

- `register_type(cls)`: the container creates the objects. Each
  registration is transient by default. `single_instance(auto_create=False)`
  keeps one object, and with `auto_create=True` it is created when the
  container is built. `weak_single_instance()` shares one object only
  while something else keeps it alive. `from_subclass(sub)` creates `sub`
  instead of `cls`.
- `register_instance(obj)`: the registration always resolves to `obj`.
- `register_factory(cls, factory)`: objects come from `factory()`. The
  result then receives its dependencies. `single_instance` and
  `weak_single_instance` make the factory's result shared.
- `register_default(cls)`: the registration resolves to one shared
  default object per class (see `get_default`).

Every registration accepts `as_type(base)`, `as_self()` and
`by_interfaces()`, and these calls can be chained. `as_type` raises
`TypeError` if the implementation does not derive from `base`. A
registration that names no type is resolvable as its own class. When a
type is registered more than once, `resolve` returns the last
registration.

### Declaring dependencies

Dependencies are the annotated parameters of an `init_dependencies`
method. The annotation of each parameter decides what it receives:

| Annotation | Value |
| --- | --- |
| `T` | one resolved object |
| `Iterable[T]` | an `ObjectsCollection` of all registered objects of `T` |
| `Callable[[], T]` | a `Factory` that resolves `T` each time it is called |
| `Optional[I]`, `Optional[Iterable[I]]`, `Optional[Callable[[], I]]` | the same, or `None` if the interface `I` is not registered |

`Iterable` and `Callable` are the ones from `collections.abc` or
`typing`. Annotations must be real objects rather than strings, so leave
out `from __future__ import annotations` in modules that declare
dependencies. A parameter without an annotation, with an unsupported
annotation, or declared as `*args` or `**kwargs` raises
`UnsupportedDependencyError`.

### Calling a function with its dependencies

```python
from collections.abc import Callable, Iterable


def run(reader: Reader, make_service: Callable[[], Service], readers: Iterable[Reader]) -> None:
    service = make_service()
    for each in readers:
        each.read()


container.invoke_with_dependencies(run)
```

### Nested containers

```python
nested = ObjectContainerBuilder().build_nested(container)
nested.resolve(Reader)  # comes from the parent container
```

A nested container looks in its own registrations first and then in its
parent's. `resolve_all` returns the parent's objects first and the nested
container's objects after them.

### Creating objects

New objects come from the last registered `InstanceFactory` that supports
their class. The lookup goes through the nested containers and their
parents, and falls back to `DefaultInstanceFactory`. The default factory
calls the class with no arguments and sets the object's `outer` attribute.
After injection it calls `finish_creation()` if the object has that
method. The `outer` comes from `set_outer_for_new_objects` on the
container's builder, or else from its parent, or else from the `outer`
passed to `build`.

### Injection on construction

A container can be bound to any hashable "world" object with
`set_container_for_world`. A class that derives from
`InjectOnConstruction` calls `self.try_init_dependencies(world)` from its
`__init__`. That call uses the injector provided by a registered
`InjectorProvider` if there is one, and otherwise the world's container.

### Errors

`resolve`, `resolve_all` and `resolve_factory` raise `ResolutionError`
for a type that is not registered. `try_resolve` returns `None` instead,
`try_resolve_all` returns an invalid `ObjectsCollection` (its
`is_valid()` is false), and `try_resolve_factory` returns an invalid
`Factory`. Calling an invalid `Factory`, or a `Factory` whose container
no longer exists, raises `FactoryError`.

## Limits

objectdi is a library only. It has no command-line tool, it does not
discover or register classes by itself, and it saves no configuration.
Everything is registered in code through the builder.

## Running the tests

```
pip install -e .[test]
pytest
```