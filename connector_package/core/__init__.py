"""Core module for connector_package package."""

from connector_package.core.exceptions import (
    ConfigDecodeError,
    ConnectorConfigError,
    SecretNameError,
)
from connector_package.core.logging import configure_logging

__all__ = [
    "ConnectorConfigError",
    "ConfigDecodeError",
    "SecretNameError",
    "configure_logging",
]
