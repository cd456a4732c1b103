"""Container configuration.

Parameters can be seeded from a YAML file:

    debug: false
    parameters:
      db.dsn: sqlite:///app.db
      mailer.transport: smtp
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "~/.vessel/config.yaml"


@dataclass
class ContainerConfig:
    """Configuration for a container.

    Attributes:
        parameters: Parameters seeded into the container at construction
        debug: Enable debug logging
    """
    parameters: dict[str, Any] = field(default_factory=dict)
    debug: bool = False

    @classmethod
    def from_file(cls, path: str | Path) -> "ContainerConfig":
        """Load configuration from YAML file."""
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ContainerConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigurationError: If ``parameters`` is not a mapping
        """
        parameters = data.get("parameters") or {}
        if not isinstance(parameters, Mapping):
            raise ConfigurationError(
                [f"parameters must be a mapping, got {type(parameters).__name__}"]
            )

        return cls(
            parameters=dict(parameters),
            debug=bool(data.get("debug", False)),
        )

    @classmethod
    def from_env(cls, prefix: str = "VESSEL") -> "ContainerConfig":
        """Load configuration from environment variables.

        Environment variables:
            {prefix}_CONFIG: Path to the YAML file (default ~/.vessel/config.yaml)
            {prefix}_DEBUG: true|1|yes, overrides the file's debug flag
        """
        config = cls.from_file(os.environ.get(f"{prefix}_CONFIG", DEFAULT_CONFIG_PATH))

        debug = os.environ.get(f"{prefix}_DEBUG")
        if debug is not None:
            config.debug = debug.lower() in ("true", "1", "yes")

        return config

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        for key in self.parameters:
            if not isinstance(key, str) or not key.strip():
                errors.append(f"parameter identifier must be a non-empty string, got {key!r}")

        return errors


def configure_logging(debug: bool = False) -> None:
    """Send container log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
