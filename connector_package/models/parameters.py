"""Producer and consumer transport parameters for connector configs."""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from connector_package.core.units import HumanByteSize, HumanDuration

MAX_PARTITION_ID = 2**32 - 1


class Compression(str, Enum):
    """Compression algorithm applied to produced record batches."""

    NONE = "none"
    GZIP = "gzip"
    SNAPPY = "snappy"
    LZ4 = "lz4"
    ZSTD = "zstd"


class ProducerParameters(BaseModel):
    """Producer tuning; every unset field falls back to the runtime default."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    linger: Optional[HumanDuration] = Field(
        default=None, description="Time to wait before flushing a batch (e.g. '1ms')"
    )
    compression: Optional[Compression] = Field(
        default=None, description="Compression algorithm for produced batches"
    )
    batch_size: Optional[HumanByteSize] = Field(
        default=None,
        alias="batch-size",
        validation_alias=AliasChoices("batch-size", "batch_size"),
        description="Maximum batch size (e.g. '44mb' or a byte count)",
    )


class ConsumerParameters(BaseModel):
    """Consumer tuning; every unset field falls back to the runtime default."""

    model_config = ConfigDict(validate_assignment=True)

    partition: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_PARTITION_ID,
        description="Partition to consume from",
    )
    max_bytes: Optional[HumanByteSize] = Field(
        default=None, description="Maximum bytes fetched per request"
    )
