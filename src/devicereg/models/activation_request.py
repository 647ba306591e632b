"""Device Activation Request Model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devicereg.models.configuration import (
    AuthorizationServiceConfiguration,
    validate_endpoint_uri,
)

KEY_ACTIVATION_CODE = "activation_code"


class DeviceActivationRequest(BaseModel):
    """
    Request to exchange an activation code for OAuth2 client credentials.

    Attributes:
        activation_endpoint: Endpoint the activation code is posted to
        configuration: Authorization server the device registered with
        activation_code: Code issued by the registration call
    """

    model_config = ConfigDict(frozen=True)

    activation_endpoint: str = Field(..., description="Activation endpoint")
    configuration: AuthorizationServiceConfiguration
    activation_code: str = Field(
        ..., min_length=1, description="Activation code from device registration"
    )

    @field_validator("activation_endpoint")
    @classmethod
    def validate_activation_endpoint(cls, v: str) -> str:
        """Validate the activation endpoint is an absolute URI."""
        return validate_endpoint_uri(v)

    def to_form_data(self) -> dict[str, str]:
        """
        Body parameters for the activation POST.

        Returns:
            dict: Form-encodable parameters
        """
        return {KEY_ACTIVATION_CODE: self.activation_code}
