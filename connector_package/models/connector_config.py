"""Versioned connector configuration.

A connector config document comes in two dialects: the legacy untagged
form, and a form tagged with ``apiVersion``. Both decode into one of the
closed set of ``ConnectorConfig`` variants, each wrapping the same
``ConnectorConfigV1`` payload::

    apiVersion: 0.1.0
    meta:
      name: my-test-mqtt
      type: mqtt-source
      topic: my-mqtt
      version: 0.1.0
    transforms:
      - uses: infinyon/jolt
"""

import re
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_serializer,
    model_validator,
)

from connector_package.core.exceptions import (
    ConfigDecodeError,
    ConnectorConfigError,
    SecretNameError,
)
from connector_package.models.meta_config import Direction, MetaConfig
from connector_package.models.secret import SecretConfig, validate_secret_name
from connector_package.models.transform_config import TransformationConfig

API_VERSION_KEY = "apiVersion"


class ApiVersion(str, Enum):
    """Known connector config schema versions."""

    # Documents written before versioning was introduced carry no tag.
    V0_0_0 = "0.0.0"
    V0_1_0 = "0.1.0"


class ConnectorConfigV1(BaseModel):
    """Connector config payload shared by every schema version.

    On the wire the pipeline keys sit at the top level next to ``meta``.
    """

    meta: MetaConfig = Field(description="Connector metadata")
    transforms: Optional[TransformationConfig] = Field(
        default=None, description="Optional transformation pipeline"
    )

    @model_validator(mode="before")
    @classmethod
    def nest_transforms(cls, data: Any) -> Any:
        """Lift the flattened ``transforms`` list into its own sub-document."""
        if isinstance(data, dict) and isinstance(data.get("transforms"), list):
            data = {**data, "transforms": {"transforms": data["transforms"]}}
        return data

    @model_serializer(mode="wrap")
    def flatten_transforms(self, handler):
        data = handler(self)
        transforms = data.pop("transforms", None)
        if transforms:
            data.update(transforms)
        return data


class ConnectorConfig(BaseModel):
    """Versioned connector config.

    Only the variants below are ever instantiated. The variant records which
    dialect a document was written in; the payload shape is the same for
    all of them.
    """

    model_config = ConfigDict(frozen=True)

    api_version: ClassVar[ApiVersion]

    config: ConnectorConfigV1

    @model_validator(mode="after")
    def check_variant(self) -> "ConnectorConfig":
        if getattr(type(self), "api_version", None) is None:
            raise TypeError(
                "ConnectorConfig is abstract; instantiate a versioned variant"
            )
        self.validate_secret_names()
        return self

    @classmethod
    def from_value(cls, value: Any) -> "ConnectorConfig":
        """
        Decode an already-parsed document tree.

        Args:
            value: Mapping as produced by a YAML or JSON parser

        Returns:
            The variant named by ``apiVersion`` (``0.0.0`` when absent or null)

        Raises:
            ConfigDecodeError: If the document does not match the schema
            SecretNameError: If a declared secret has an invalid name
        """
        if not isinstance(value, Mapping):
            raise ConfigDecodeError(
                f"connector config must be a mapping, got {type(value).__name__}"
            )

        document = dict(value)
        version = document.pop(API_VERSION_KEY, None)
        if version is None:
            version = ApiVersion.V0_0_0.value
        variant = _VARIANTS.get(version) if isinstance(version, str) else None
        if variant is None:
            accepted = [v.value for v in ApiVersion]
            expected = " or ".join(f"`{v}`" for v in accepted)
            raise ConfigDecodeError(
                f"{API_VERSION_KEY}: unknown variant `{version}`, expected {expected}",
                field=API_VERSION_KEY,
                accepted=accepted,
            )

        try:
            payload = ConnectorConfigV1.model_validate(document)
            return variant(config=payload)
        except ValidationError as e:
            raise _decode_error(e) from e

    @classmethod
    def config_from_str(cls, text: str) -> "ConnectorConfig":
        from connector_package.models.loader import config_from_str

        return config_from_str(text)

    @classmethod
    def from_file(cls, path: str | Path) -> "ConnectorConfig":
        from connector_package.models.loader import from_file

        return from_file(path)

    def validate_secret_names(self) -> None:
        """Check every declared secret name, in declaration order.

        Raises:
            SecretNameError: For the first invalid name
        """
        for secret in self.config.meta.secrets or ():
            validate_secret_name(str(secret.name))

    @property
    def meta(self) -> MetaConfig:
        """Connector metadata; assignments to its fields are re-validated."""
        return self.config.meta

    @property
    def transforms(self) -> Optional[TransformationConfig]:
        return self.config.transforms

    @property
    def direction(self) -> Direction:
        return self.meta.direction

    @property
    def image(self) -> str:
        return self.meta.image

    def secrets(self) -> FrozenSet[SecretConfig]:
        return self.meta.secret_set()

    def to_value(self) -> Dict[str, Any]:
        """Tagged document tree with ``apiVersion`` first and unset fields omitted."""
        self.validate_secret_names()
        return {
            API_VERSION_KEY: self.api_version.value,
            **self.config.model_dump(mode="json", by_alias=True, exclude_none=True),
        }

    def to_yaml(self) -> str:
        from connector_package.models.loader import to_yaml

        return to_yaml(self)

    def write_to_file(self, path: str | Path) -> None:
        from connector_package.models.loader import write_to_file

        write_to_file(self, path)


class ConnectorConfigV0_0_0(ConnectorConfig):
    """Legacy config written before ``apiVersion`` existed."""

    api_version: ClassVar[ApiVersion] = ApiVersion.V0_0_0

    def secrets(self) -> FrozenSet[SecretConfig]:
        # The legacy format predates secret support.
        return frozenset()


class ConnectorConfigV0_1_0(ConnectorConfig):
    """Config tagged ``apiVersion: 0.1.0``."""

    api_version: ClassVar[ApiVersion] = ApiVersion.V0_1_0


_VARIANTS: Dict[str, type[ConnectorConfig]] = {
    ApiVersion.V0_0_0.value: ConnectorConfigV0_0_0,
    ApiVersion.V0_1_0.value: ConnectorConfigV0_1_0,
}

_QUOTED_RE = re.compile(r"'([^']*)'")


def _decode_error(exc: ValidationError) -> ConnectorConfigError:
    """Turn the first pydantic error into a package exception.

    Structural errors win over secret name errors, matching the order in
    which a document is decoded and then validated.
    """
    errors = exc.errors()
    structural = [
        err
        for err in errors
        if not isinstance((err.get("ctx") or {}).get("error"), SecretNameError)
    ]
    if not structural:
        return errors[0]["ctx"]["error"]

    err = structural[0]
    field = ".".join(str(part) for part in err["loc"])
    if err["type"] == "missing":
        message = f"missing field `{err['loc'][-1]}`"
    else:
        message = err["msg"]

    accepted = None
    expected = (err.get("ctx") or {}).get("expected")
    if err["type"] == "enum" and isinstance(expected, str):
        accepted = _QUOTED_RE.findall(expected)

    if field:
        message = f"{field}: {message}"
    return ConfigDecodeError(message, field=field or None, accepted=accepted)
