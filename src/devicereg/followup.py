"""Follow-up requests derived from a device registration response."""

from devicereg.core.logging import logger
from devicereg.errors import InvalidStateError
from devicereg.models.activation_request import DeviceActivationRequest
from devicereg.models.registration_response import DeviceRegistrationResponse


def create_activation_request(
    response: DeviceRegistrationResponse, activation_endpoint: str
) -> DeviceActivationRequest:
    """
    Create the request exchanging the activation code for OAuth2 credentials.

    Args:
        response: Parsed registration response
        activation_endpoint: Endpoint the activation code is posted to

    Returns:
        DeviceActivationRequest: Validated activation request

    Raises:
        InvalidStateError: If the response carries no activation code
        pydantic.ValidationError: If the activation request is invalid
    """
    if response.activation_code is None:
        raise InvalidStateError("activation code not available for activation request")

    logger.info(f"Creating device activation request for {activation_endpoint}")
    return DeviceActivationRequest(
        activation_endpoint=activation_endpoint,
        configuration=response.request.configuration,
        activation_code=response.activation_code,
    )
