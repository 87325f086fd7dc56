"""Resolution of dependencies declared through parameter annotations.

A dependency is declared by annotating a parameter with one of:

* ``SomeClass`` or ``SomeInterface``: a single resolved object;
* ``Iterable[T]``: every registered object of ``T`` as an ObjectsCollection;
* ``Callable[[], T]``: a Factory that resolves ``T`` on each call;
* ``Optional[I]``, ``Optional[Iterable[I]]``, ``Optional[Callable[[], I]]``
  where ``I`` is an interface: the same, or None when ``I`` is not registered.
"""

from __future__ import annotations

import collections.abc
import types
import typing
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, Callable, Union

from objectdi.interfaces import Resolver, is_interface

_NoneType = type(None)

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


class UnsupportedDependencyError(TypeError):
    """Raised when a parameter cannot be filled from a resolver."""


class _Kind(Enum):
    OBJECT = auto()
    COLLECTION = auto()
    FACTORY = auto()


@dataclass(frozen=True)
class _Dependency:
    kind: _Kind
    type_: type
    optional: bool = False


@dataclass(frozen=True)
class _Parameter:
    name: str
    keyword_only: bool
    annotation: Any
    dependency: _Dependency


def _is_resolvable(candidate: Any) -> bool:
    return (
        isinstance(candidate, type)
        and typing.get_origin(candidate) is None
        and candidate is not _NoneType
    )


def _classify_required(annotation: Any) -> _Dependency | None:
    origin = typing.get_origin(annotation)
    if origin is None:
        if _is_resolvable(annotation):
            return _Dependency(_Kind.OBJECT, annotation)
        return None

    args = typing.get_args(annotation)
    if origin is collections.abc.Iterable and len(args) == 1 and _is_resolvable(args[0]):
        return _Dependency(_Kind.COLLECTION, args[0])
    if (
        origin is collections.abc.Callable
        and len(args) == 2
        and args[0] == []
        and _is_resolvable(args[1])
    ):
        return _Dependency(_Kind.FACTORY, args[1])
    return None


def _classify(annotation: Any) -> _Dependency | None:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        args = typing.get_args(annotation)
        present = [arg for arg in args if arg is not _NoneType]
        if len(args) != 2 or len(present) != 1:
            return None
        inner = _classify_required(present[0])
        if inner is None or not is_interface(inner.type_):
            return None
        return replace(inner, optional=True)
    return _classify_required(annotation)


def is_supported_argument(annotation: Any) -> bool:
    """Return True if a parameter with this annotation can be resolved."""
    return _classify(annotation) is not None


def resolve_dependency(resolver: Resolver, annotation: Any) -> Any:
    """Resolve the value for a parameter annotated with ``annotation``."""
    dependency = _classify(annotation)
    if dependency is None:
        raise UnsupportedDependencyError(
            f"Unsupported dependency annotation: {annotation!r}"
        )
    return _resolve(resolver, dependency)


def _resolve(resolver: Resolver, dependency: _Dependency) -> Any:
    type_ = dependency.type_
    if dependency.optional:
        if dependency.kind is _Kind.OBJECT:
            return _cast(resolver.try_resolve(type_), type_)
        if dependency.kind is _Kind.COLLECTION:
            collection = resolver.try_resolve_all(type_)
            return collection if collection.is_valid() else None
        factory = resolver.try_resolve_factory(type_)
        return factory if factory.is_valid() else None

    if dependency.kind is _Kind.OBJECT:
        return _cast(resolver.resolve(type_), type_)
    if dependency.kind is _Kind.COLLECTION:
        return resolver.resolve_all(type_)
    return resolver.resolve_factory(type_)


def _cast(obj: Any, type_: type) -> Any:
    return obj if isinstance(obj, type_) else None


def _target(function: Any) -> tuple[types.FunctionType, int]:
    """Return the plain function behind ``function`` and how many leading
    parameters are already bound."""
    if isinstance(function, types.MethodType):
        inner = function.__func__
        if isinstance(inner, types.FunctionType):
            return inner, 1
    elif isinstance(function, types.FunctionType):
        return function, 0
    elif callable(function):
        call = getattr(type(function), "__call__", None)
        if isinstance(call, types.FunctionType):
            return call, 1
    if not callable(function):
        raise UnsupportedDependencyError(f"{function!r} is not callable")
    raise UnsupportedDependencyError(f"Cannot read the parameters of {function!r}")


def _parameters(function: Callable[..., Any]) -> list[_Parameter]:
    func, bound = _target(function)
    code = func.__code__
    positional = code.co_argcount
    keyword_only = code.co_kwonlyargcount
    names = code.co_varnames[: positional + keyword_only]

    if code.co_flags & (_CO_VARARGS | _CO_VARKEYWORDS):
        raise UnsupportedDependencyError(
            f"Variadic parameter {code.co_varnames[positional + keyword_only]!r} "
            "cannot be injected"
        )

    annotations = getattr(func, "__annotations__", {}) or {}
    parameters = []
    for index, name in enumerate(names):
        if index < bound:
            continue
        if name not in annotations:
            raise UnsupportedDependencyError(f"Parameter {name!r} has no annotation")
        annotation = annotations[name]
        dependency = _classify(annotation)
        if dependency is None:
            raise UnsupportedDependencyError(
                f"Parameter {name!r} has unsupported annotation {annotation!r}"
            )
        parameters.append(
            _Parameter(
                name=name,
                keyword_only=index >= positional,
                annotation=annotation,
                dependency=dependency,
            )
        )
    return parameters


def dependency_annotations(function: Callable[..., Any]) -> tuple[Any, ...]:
    """Return the dependency annotations of ``function``'s parameters in order.

    Raises UnsupportedDependencyError if any parameter cannot be injected.
    """
    return tuple(parameter.annotation for parameter in _parameters(function))


def has_init_dependencies(cls: type) -> bool:
    """Return True if ``cls`` defines an ``init_dependencies`` method."""
    return callable(getattr(cls, "init_dependencies", None))


def invoke_with_dependencies(resolver: Resolver, function: Callable[..., Any]) -> Any:
    """Call ``function`` with every parameter resolved from ``resolver``."""
    args = []
    kwargs = {}
    for parameter in _parameters(function):
        value = _resolve(resolver, parameter.dependency)
        if parameter.keyword_only:
            kwargs[parameter.name] = value
        else:
            args.append(value)
    return function(*args, **kwargs)


def inject_dependencies(obj: Any, resolver: Resolver) -> None:
    """Call ``obj.init_dependencies`` with resolved arguments, if it has one."""
    if has_init_dependencies(type(obj)):
        invoke_with_dependencies(resolver, obj.init_dependencies)