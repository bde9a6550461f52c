"""Connector config loader with YAML parsing and writing."""

import logging
from pathlib import Path
from typing import Any

import yaml

from connector_package.core.exceptions import ConfigDecodeError
from connector_package.models.connector_config import ConnectorConfig

logger = logging.getLogger(__name__)


def config_from_str(text: str) -> ConnectorConfig:
    """
    Parse a connector config from YAML text.

    Args:
        text: YAML document

    Returns:
        Validated ConnectorConfig variant

    Raises:
        ConfigDecodeError: If the text is not valid YAML or does not match the schema
        SecretNameError: If a declared secret has an invalid name
    """
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigDecodeError(f"Invalid YAML in connector config: {e}") from e

    return from_value(value)


def from_value(value: Any) -> ConnectorConfig:
    """
    Build a connector config from an already-decoded document tree.

    Args:
        value: Mapping as produced by a YAML or JSON parser

    Returns:
        Validated ConnectorConfig variant
    """
    connector_config = ConnectorConfig.from_value(value)
    logger.debug(
        "Using connector config %r",
        connector_config,
        extra={
            "connector_name": connector_config.meta.name,
            "api_version": connector_config.api_version.value,
        },
    )
    return connector_config


def from_file(path: str | Path) -> ConnectorConfig:
    """
    Load a connector config from a YAML file.

    The file is read fully into memory before parsing. I/O errors such as a
    missing or unreadable file propagate unchanged.

    Args:
        path: Path to connector config YAML file

    Returns:
        Validated ConnectorConfig variant

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
        ConfigDecodeError: If the document does not match the schema
        SecretNameError: If a declared secret has an invalid name
    """
    text = Path(path).read_text(encoding="utf-8")
    return config_from_str(text)


def load_config(path: str | Path) -> ConnectorConfig:
    """Alias for from_file."""
    return from_file(path)


def to_yaml(connector_config: ConnectorConfig) -> str:
    """Serialize a connector config to tagged YAML text."""
    return yaml.safe_dump(
        connector_config.to_value(), sort_keys=False, default_flow_style=False
    )


def write_to_file(connector_config: ConnectorConfig, path: str | Path) -> None:
    """
    Write a connector config to a YAML file.

    The write is a single, non-atomic overwrite of ``path``.

    Args:
        connector_config: Config to serialize
        path: Destination file
    """
    text = to_yaml(connector_config)
    Path(path).write_text(text, encoding="utf-8")
    logger.debug(
        "Wrote connector config to %s",
        path,
        extra={"connector_name": connector_config.meta.name},
    )
