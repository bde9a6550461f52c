"""Connector identity and transport metadata."""

from enum import Enum
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from connector_package.models.parameters import ConsumerParameters, ProducerParameters
from connector_package.models.secret import SecretConfig

SOURCE_SUFFIX = "-source"
IMAGE_PREFIX = "infinyon/fluvio-connect"


class Direction(str, Enum):
    """Whether a connector produces into or consumes from its topic."""

    SOURCE = "source"
    DESTINATION = "dest"

    def is_source(self) -> bool:
        return self is Direction.SOURCE


class MetaConfig(BaseModel):
    """Identity and transport metadata for one connector instance.

    ``direction`` and ``image`` are derived from ``type`` and ``version`` on
    every access, so they stay correct after the metadata is edited in place.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(description="Connector instance name")
    type: str = Field(
        description="Connector type (e.g., 'mqtt-source', 'kafka-sink')"
    )
    topic: str = Field(description="Topic the connector reads from or writes to")
    version: str = Field(description="Connector image version")
    producer: Optional[ProducerParameters] = Field(
        default=None, description="Producer parameters (source connectors)"
    )
    consumer: Optional[ConsumerParameters] = Field(
        default=None, description="Consumer parameters (destination connectors)"
    )
    secrets: Optional[List[SecretConfig]] = Field(
        default=None, description="Secrets the connector needs at runtime"
    )

    @property
    def direction(self) -> Direction:
        """Source when ``type`` ends with ``-source``, destination otherwise."""
        if self.type.endswith(SOURCE_SUFFIX):
            return Direction.SOURCE
        return Direction.DESTINATION

    @property
    def image(self) -> str:
        return f"{IMAGE_PREFIX}-{self.type}:{self.version}"

    def secret_set(self) -> FrozenSet[SecretConfig]:
        """Declared secrets with duplicate names collapsed."""
        return frozenset(self.secrets or ())
