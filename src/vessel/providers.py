"""Service providers group related definitions behind one ``register`` call."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .container import Container


class ServiceProvider(ABC):
    """Base class for service providers.

    Usage:
        class MailerProvider(ServiceProvider):
            def register(self, container):
                container.set("mailer.transport", "smtp")
                container.set("mailer", container.share(
                    lambda c: Mailer(c.get("mailer.transport"))
                ))

        container.register(MailerProvider())
    """

    @abstractmethod
    def register(self, container: "Container") -> None:
        """Install this provider's parameters and factories into ``container``."""
        pass
