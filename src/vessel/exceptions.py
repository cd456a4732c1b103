"""Errors raised by the container.

All errors are raised synchronously at the call site and never logged or
retried by the container itself.
"""


class ContainerError(Exception):
    """Base class for all container errors."""


class IdentifierNotFoundError(ContainerError, KeyError):
    """Raised when an identifier has no slot in the container."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'Identifier "{identifier}" is not defined.')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidCallableError(ContainerError, TypeError):
    """Raised when an argument expected to be callable is not."""


class NotAFactoryError(ContainerError, TypeError):
    """Raised when extending an identifier that holds a plain parameter."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f'Identifier "{identifier}" does not contain an object definition.'
        )


class ConfigurationError(ContainerError, ValueError):
    """Raised when container configuration is malformed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid container configuration: " + "; ".join(errors))
