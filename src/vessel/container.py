"""Dependency injection container.

Maps string identifiers to slots. A slot is either a parameter, returned
as-is, or a factory: any callable, invoked with the container on every
``get``. Whether a slot is a factory is decided by ``callable()`` at lookup
time, so replacing one kind with the other takes effect immediately.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from .exceptions import (
    ConfigurationError,
    IdentifierNotFoundError,
    InvalidCallableError,
    NotAFactoryError,
)
from .factories import Decorator, ExtendedFactory, Factory, ProtectedCallable, SharedFactory

logger = logging.getLogger(__name__)


class _Undefined:
    """Type of the ``UNDEFINED`` sentinel."""

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


# A slot explicitly set to UNDEFINED is reported as not existing.
UNDEFINED = _Undefined()


class Container:
    """Dependency injection container.

    Usage:
        container = Container({"db.dsn": "sqlite://"})
        container.set("db", container.share(lambda c: connect(c.get("db.dsn"))))
        container.set("repo", lambda c: Repository(c.get("db")))

        repo = container.get("repo")   # new Repository, shared connection

    The container is not thread-safe. Guard it externally when it is
    mutated from more than one thread.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: dict[str, Any] = dict(values) if values else {}

    @classmethod
    def from_config(cls, config) -> "Container":
        """Create a container seeded with ``config.parameters``.

        ``config.debug`` is not applied here; pass it to ``configure_logging``.

        Raises:
            ConfigurationError: If ``config.validate()`` reports errors
        """
        errors = config.validate()
        if errors:
            raise ConfigurationError(errors)
        return cls(config.parameters)

    def set(self, id: str, value: Any) -> None:
        """Set a parameter or a factory.

        Args:
            id: Unique identifier for the parameter or object
            value: The parameter value, or a callable taking the container
        """
        self._values[id] = value
        logger.debug(f"Set {id!r} ({'factory' if callable(value) else 'parameter'})")

    def get(self, id: str) -> Any:
        """Get a parameter or an object.

        Factories are invoked with this container on every call unless they
        were wrapped with ``share``.

        Raises:
            IdentifierNotFoundError: If the identifier is not defined
        """
        if id not in self._values:
            raise IdentifierNotFoundError(id)
        value = self._values[id]
        return value(self) if callable(value) else value

    def exists(self, id: str) -> bool:
        """Check whether a parameter or an object is set."""
        return self._values.get(id, UNDEFINED) is not UNDEFINED

    def unset(self, id: str) -> None:
        """Remove a parameter or an object. Absent identifiers are ignored."""
        if self._values.pop(id, UNDEFINED) is not UNDEFINED:
            logger.debug(f"Unset {id!r}")

    def identifiers(self) -> list[str]:
        """Return the identifiers that exist, in insertion order."""
        return [id for id, value in self._values.items() if value is not UNDEFINED]

    def share(self, factory: Factory) -> SharedFactory:
        """Wrap ``factory`` so it is only invoked once.

        The result is memoized by the returned wrapper, so uniqueness holds
        per wrapper instance rather than per identifier.

        Raises:
            InvalidCallableError: If ``factory`` is not callable
        """
        if not callable(factory):
            raise InvalidCallableError("First argument is expected to be a valid callable")
        return SharedFactory(factory)

    def protect(self, factory: Callable) -> ProtectedCallable:
        """Wrap a callable so ``get`` returns it instead of invoking it.

        Useful for storing a callable as a parameter.

        Raises:
            InvalidCallableError: If ``factory`` is not callable
        """
        if not callable(factory):
            raise InvalidCallableError("First argument is expected to be a valid callable")
        return ProtectedCallable(factory)

    def raw(self, id: str) -> Any:
        """Get a parameter or the factory defining an object, without invoking it.

        Raises:
            IdentifierNotFoundError: If the identifier is not defined
        """
        if id not in self._values:
            raise IdentifierNotFoundError(id)
        return self._values[id]

    def extend(self, id: str, decorator: Decorator) -> ExtendedFactory:
        """Extend an object definition without building the object.

        The factory stored under ``id`` is replaced by one that builds the
        original object and returns ``decorator(obj, container)``. The
        replacement is installed and returned.

        Raises:
            IdentifierNotFoundError: If the identifier is not defined
            InvalidCallableError: If ``decorator`` is not callable
            NotAFactoryError: If the identifier holds a parameter
        """
        if id not in self._values:
            raise IdentifierNotFoundError(id)

        if not callable(decorator):
            raise InvalidCallableError("Second argument is expected to be a valid callable")

        factory = self._values[id]
        if not callable(factory):
            raise NotAFactoryError(id)

        extended = ExtendedFactory(factory, decorator)
        self._values[id] = extended
        logger.debug(f"Extended {id!r} with {decorator!r}")
        return extended

    def register(self, provider, values: Optional[Mapping[str, Any]] = None) -> "Container":
        """Register a service provider, then apply ``values`` on top of it.

        Args:
            provider: A ``ServiceProvider`` or any object with ``register(container)``
            values: Parameters or factories to set after the provider ran

        Returns:
            This container, so registrations can be chained.

        Raises:
            InvalidCallableError: If ``provider`` has no callable ``register``
        """
        register = getattr(provider, "register", None)
        if not callable(register):
            raise InvalidCallableError(
                f"{type(provider).__name__} does not define a callable register()"
            )

        logger.debug(f"Registering provider {type(provider).__name__}")
        register(self)

        for key, value in (values or {}).items():
            self.set(key, value)

        return self

    def __getitem__(self, id: str) -> Any:
        return self.get(id)

    def __setitem__(self, id: str, value: Any) -> None:
        self.set(id, value)

    def __delitem__(self, id: str) -> None:
        self.unset(id)

    def __contains__(self, id: object) -> bool:
        return self.exists(id)

    # Not iterable; use identifiers().
    __iter__ = None

    def __repr__(self) -> str:
        return f"Container(identifiers={self.identifiers()!r})"
