"""A dependency injection container with lifetimes, nested containers and factories."""

__version__ = "0.1.0"

__all__ = [
    "builder",
    "collection",
    "container",
    "dependencies",
    "factory",
    "injection",
    "interfaces",
    "lifetimes",
    "registration",
]