"""Connector Package - versioned connector configuration.

Parses, validates and normalizes the YAML documents that describe a
connector's identity, transport parameters and transformation pipeline.
"""

__version__ = "0.1.0"

# Exceptions
from connector_package.core.exceptions import (
    ConfigDecodeError,
    ConnectorConfigError,
    SecretNameError,
)

# Config models
from connector_package.models.connector_config import (
    ApiVersion,
    ConnectorConfig,
    ConnectorConfigV0_0_0,
    ConnectorConfigV0_1_0,
    ConnectorConfigV1,
)

# Public API
from connector_package.models.loader import (
    config_from_str,
    from_file,
    from_value,
    load_config,
    to_yaml,
    write_to_file,
)
from connector_package.models.meta_config import Direction, MetaConfig
from connector_package.models.parameters import (
    Compression,
    ConsumerParameters,
    ProducerParameters,
)
from connector_package.models.secret import SecretConfig, SecretName
from connector_package.models.transform_config import (
    TransformationConfig,
    TransformationStep,
)

__all__ = [
    # Version
    "__version__",
    # Public API
    "config_from_str",
    "from_file",
    "from_value",
    "load_config",
    "to_yaml",
    "write_to_file",
    # Config models
    "ApiVersion",
    "ConnectorConfig",
    "ConnectorConfigV0_0_0",
    "ConnectorConfigV0_1_0",
    "ConnectorConfigV1",
    "MetaConfig",
    "Direction",
    "ProducerParameters",
    "ConsumerParameters",
    "Compression",
    "SecretConfig",
    "SecretName",
    "TransformationConfig",
    "TransformationStep",
    # Exceptions
    "ConnectorConfigError",
    "ConfigDecodeError",
    "SecretNameError",
]
