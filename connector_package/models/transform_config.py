"""Transformation pipeline models attached to connector configs."""

import json
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class TransformationStep(BaseModel):
    """
    A single SmartModule invocation in the pipeline.

    Parameters under ``with`` are handed to the SmartModule as strings; any
    structured YAML value is stored as compact JSON text with sorted keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    uses: str = Field(description="SmartModule reference (e.g., 'infinyon/json-sql')")
    with_: Dict[str, str] = Field(
        default_factory=dict,
        alias="with",
        description="SmartModule parameters",
    )

    @field_validator("with_", mode="before")
    @classmethod
    def encode_parameters(cls, v: Any) -> Any:
        """Store non-string parameter values as JSON strings."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        return {
            key: value if isinstance(value, str) else _to_json(value)
            for key, value in v.items()
        }


class TransformationConfig(BaseModel):
    """Configuration for the transformation pipeline."""

    transforms: List[TransformationStep] = Field(
        default_factory=list, description="Transformation steps in execution order"
    )
