"""Secret reference models for connector configs."""

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from connector_package.core.exceptions import SecretNameError


def validate_secret_name(value: str) -> str:
    """
    Check a secret name against the secret name grammar.

    A secret name is non-empty, contains only ASCII letters, digits and
    underscores, and does not start with a digit. The value is never trimmed
    or case-folded.

    Args:
        value: Candidate secret name

    Returns:
        The unchanged value

    Raises:
        SecretNameError: With reason ``empty``, ``invalid character`` or
            ``leading digit``
    """
    if not value:
        raise SecretNameError(
            "Secret name cannot be empty", reason="empty", value=value
        )
    if not all(c.isascii() and (c.isalnum() or c == "_") for c in value):
        raise SecretNameError(
            f"Secret name `{value}` can only contain alphanumeric ASCII "
            "characters and underscores",
            reason="invalid character",
            value=value,
        )
    if value[0].isdigit():
        raise SecretNameError(
            f"Secret name `{value}` cannot start with a number",
            reason="leading digit",
            value=value,
        )
    return value


class SecretName(RootModel[str]):
    """
    Name of a secret, valid for every live instance.

    ``SecretName.parse`` is the supported constructor and raises
    ``SecretNameError``. Direct construction and ``model_validate`` run the
    same check but report it as a pydantic ``ValidationError`` whose error
    context holds the ``SecretNameError``.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        return validate_secret_name(v)

    @classmethod
    def parse(cls, value: str) -> "SecretName":
        """Parse a secret name, raising SecretNameError when it is invalid."""
        validate_secret_name(value)
        return cls(value)

    def as_str(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root


class SecretConfig(BaseModel):
    """Reference to a named secret; equal and hashed by name."""

    model_config = ConfigDict(frozen=True)

    name: SecretName = Field(
        description=(
            "The name of the secret. It can only contain alphanumeric ASCII "
            "characters and underscores. It cannot start with a number."
        )
    )

    @classmethod
    def new(cls, name: SecretName | str) -> "SecretConfig":
        if isinstance(name, str):
            name = SecretName.parse(name)
        return cls(name=name)
