"""Vessel: a minimal dependency injection container.

Identifiers map to parameters (returned as-is) or factories (callables
invoked with the container). Factories can be shared, protected and
extended:

    from vessel import Container

    container = Container()
    container.set("greeting", lambda c: "hi")
    container.extend("greeting", lambda value, c: value + "!")

    container.get("greeting")  # "hi!"
"""

from .config import ContainerConfig, configure_logging
from .container import UNDEFINED, Container
from .exceptions import (
    ConfigurationError,
    ContainerError,
    IdentifierNotFoundError,
    InvalidCallableError,
    NotAFactoryError,
)
from .factories import ExtendedFactory, ProtectedCallable, SharedFactory
from .providers import ServiceProvider

__all__ = [
    "Container",
    "ContainerConfig",
    "ServiceProvider",
    "SharedFactory",
    "ProtectedCallable",
    "ExtendedFactory",
    "ContainerError",
    "IdentifierNotFoundError",
    "InvalidCallableError",
    "NotAFactoryError",
    "ConfigurationError",
    "UNDEFINED",
    "configure_logging",
]
