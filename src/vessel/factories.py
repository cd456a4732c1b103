"""Factory wrappers produced by ``Container.share``, ``protect`` and ``extend``.

Each wrapper is itself a factory: a callable taking the container as its
only argument. Once installed under an identifier the container treats it
like any other factory.
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Factory = Callable[[Any], Any]
Decorator = Callable[[Any, Any], Any]

_EMPTY = object()


class SharedFactory:
    """Factory that builds its value once and returns it on every later call.

    The memo cell belongs to this instance, not to an identifier. Installing
    the same instance under two identifiers makes both resolve to one value;
    sharing the same underlying factory twice gives two independent cells.
    """

    def __init__(self, factory: Factory):
        self._factory = factory
        self._object = _EMPTY

    @property
    def factory(self) -> Factory:
        return self._factory

    @property
    def is_built(self) -> bool:
        """Whether the memo cell holds a value."""
        return self._object is not _EMPTY

    def reset(self) -> None:
        """Drop the memoized value so the next call rebuilds it."""
        self._object = _EMPTY

    def __call__(self, container: Any) -> Any:
        if self._object is _EMPTY:
            logger.debug(f"Building shared value from {self._factory!r}")
            self._object = self._factory(container)
        return self._object

    def __repr__(self) -> str:
        state = "built" if self.is_built else "pending"
        return f"SharedFactory({self._factory!r}, {state})"


class ProtectedCallable:
    """Factory that hands back the wrapped callable without invoking it."""

    def __init__(self, callable_: Callable):
        self._callable = callable_

    @property
    def callable(self) -> Callable:
        return self._callable

    def __call__(self, container: Any) -> Callable:
        return self._callable

    def __repr__(self) -> str:
        return f"ProtectedCallable({self._callable!r})"


class ExtendedFactory:
    """Factory that passes the original factory's result through a decorator.

    The original factory is captured at construction time. Extending an
    already extended factory nests one ``ExtendedFactory`` inside another.
    """

    def __init__(self, factory: Factory, decorator: Decorator):
        self._factory = factory
        self._decorator = decorator

    @property
    def factory(self) -> Factory:
        return self._factory

    @property
    def decorator(self) -> Decorator:
        return self._decorator

    def __call__(self, container: Any) -> Any:
        return self._decorator(self._factory(container), container)

    def __repr__(self) -> str:
        return f"ExtendedFactory({self._factory!r}, {self._decorator!r})"
