"""Models module for connector config definitions."""

from connector_package.models.connector_config import (
    ApiVersion,
    ConnectorConfig,
    ConnectorConfigV0_0_0,
    ConnectorConfigV0_1_0,
    ConnectorConfigV1,
)
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
from connector_package.models.secret import (
    SecretConfig,
    SecretName,
    validate_secret_name,
)
from connector_package.models.transform_config import (
    TransformationConfig,
    TransformationStep,
)

__all__ = [
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
    "validate_secret_name",
    "TransformationConfig",
    "TransformationStep",
    "config_from_str",
    "from_file",
    "from_value",
    "load_config",
    "to_yaml",
    "write_to_file",
]
