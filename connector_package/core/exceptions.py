"""Exception hierarchy for the connector_package package."""

from typing import Sequence


class ConnectorConfigError(Exception):
    """Base exception for all connector config errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigDecodeError(ConnectorConfigError):
    """Raised when a document does not match the connector config schema.

    Covers missing required fields, type mismatches, unknown enum variants
    and unknown ``apiVersion`` values. ``field`` is the dotted path of the
    offending field, ``accepted`` the allowed literals when the field is a
    closed set.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        accepted: Sequence[str] | None = None,
        context: dict | None = None,
    ):
        super().__init__(message, context=context)
        self.field = field
        self.accepted = list(accepted) if accepted else []


class SecretNameError(ConnectorConfigError, ValueError):
    """Raised when a secret name violates the secret name grammar."""

    def __init__(self, message: str, reason: str, value: str):
        super().__init__(message)
        self.reason = reason
        self.value = value
