"""
Adapter from device registration responses to plain OAuth2 responses.

Kept apart from parsing so the target types can be replaced or patched
without touching the registration models.
"""

from devicereg.models.authorization import AuthorizationResponse
from devicereg.models.registration_response import DeviceRegistrationResponse


def to_authorization_response(
    response: DeviceRegistrationResponse, client_id: str
) -> AuthorizationResponse:
    """
    Convert to an AuthorizationResponse consumable by an OAuth2 client.

    Args:
        response: Parsed registration response
        client_id: OAuth client ID for the base authorization request

    Returns:
        AuthorizationResponse: Response carrying the (possibly absent) code
    """
    authorization_request = response.request.to_authorization_request(client_id)
    return AuthorizationResponse.from_request(
        authorization_request, authorization_code=response.authorization_code
    )
