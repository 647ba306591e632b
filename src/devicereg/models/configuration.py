"""Authorization Service Configuration Model."""

from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


def validate_endpoint_uri(value: str) -> str:
    """
    Check that an endpoint is an absolute URI with a scheme and a host.

    Args:
        value: Endpoint URI

    Returns:
        The unchanged URI

    Raises:
        ValueError: If the URI is relative or unparseable
    """
    try:
        parts = urlsplit(value)
    except ValueError as e:
        raise ValueError(f"Endpoint is not a valid URI: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise ValueError("Endpoint must be an absolute URI with scheme and host")
    return value


class AuthorizationServiceConfiguration(BaseModel):
    """
    Endpoints of the authorization server a device registers with.

    Attributes:
        authorization_endpoint: OAuth2 authorization endpoint
        token_endpoint: OAuth2 token endpoint
        registration_endpoint: Device registration endpoint (optional)
    """

    model_config = ConfigDict(frozen=True)

    authorization_endpoint: str = Field(
        ..., description="OAuth2 authorization endpoint"
    )
    token_endpoint: str = Field(..., description="OAuth2 token endpoint")
    registration_endpoint: str | None = Field(
        None, description="Device registration endpoint"
    )

    @field_validator("authorization_endpoint", "token_endpoint", "registration_endpoint")
    @classmethod
    def validate_endpoints(cls, v: str | None) -> str | None:
        """Validate endpoints are absolute URIs."""
        if v is None:
            return v
        return validate_endpoint_uri(v)

    def serialize(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting absent endpoints."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def deserialize(cls, data: dict[str, Any]) -> "AuthorizationServiceConfiguration":
        """
        Rebuild a configuration from serialize() output.

        Raises:
            pydantic.ValidationError: If the data is not a valid configuration
        """
        return cls.model_validate(data)
