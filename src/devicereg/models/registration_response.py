"""Device Registration Response Model."""

from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from devicereg.core.logging import logger, mask
from devicereg.models.registration_request import DeviceRegistrationRequest

if TYPE_CHECKING:
    from devicereg.models.activation_request import DeviceActivationRequest
    from devicereg.models.authorization import AuthorizationResponse

KEY_REQUEST = "request"
KEY_CODE = "code"
KEY_ACTIVATION_CODE = "activation_code"
KEY_STATE = "state"


def _first_query_value(params: dict[str, list[str]], key: str) -> str | None:
    values = params.get(key)
    return values[0] if values else None


class DeviceRegistrationResponse(BaseModel):
    """
    Response of the device registration call.

    Attributes:
        request: The registration request this response answers
        authorization_code: Authorization code issued by the server (optional)
        activation_code: Device activation code issued by the server (optional)
        state: State as passed in the request (optional)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    request: DeviceRegistrationRequest
    authorization_code: str | None = Field(
        None, alias=KEY_CODE, description="Authorization code"
    )
    activation_code: str | None = Field(
        None, alias=KEY_ACTIVATION_CODE, description="Activation code"
    )
    state: str | None = Field(None, alias=KEY_STATE, description="Returned state")

    @classmethod
    def from_redirect(
        cls, request: DeviceRegistrationRequest, uri: str
    ) -> "DeviceRegistrationResponse":
        """
        Extract the registration response from the query of a redirect URI.

        Each parameter is independently optional; a missing parameter maps
        to None, a parameter present with an empty value maps to "". No
        semantic validation is performed.

        Args:
            request: The request that triggered the redirect
            uri: The redirect URI returned by the server

        Returns:
            DeviceRegistrationResponse: Parsed response
        """
        try:
            query = urlsplit(uri).query
        except ValueError:
            logger.warning("Redirect URI could not be parsed, treating it as empty")
            query = ""

        params = parse_qs(query, keep_blank_values=True)
        response = cls(
            request=request,
            authorization_code=_first_query_value(params, KEY_CODE),
            activation_code=_first_query_value(params, KEY_ACTIVATION_CODE),
            state=_first_query_value(params, KEY_STATE),
        )

        logger.debug(
            f"Parsed registration redirect: code={mask(response.authorization_code)}, "
            f"activation_code={mask(response.activation_code)}, "
            f"state={mask(response.state)}"
        )
        return response

    def to_json(self) -> str:
        """Serialize to wire text (see devicereg.codec)."""
        from devicereg.codec import serialize_response

        return serialize_response(self)

    @classmethod
    def from_json(
        cls, text: str | bytes, *, require_codes: bool | None = None
    ) -> "DeviceRegistrationResponse":
        """Parse wire text (see devicereg.codec)."""
        from devicereg.codec import deserialize_response

        return deserialize_response(text, require_codes=require_codes)

    def to_envelope(
        self, envelope: MutableMapping[str, Any] | None = None
    ) -> MutableMapping[str, Any]:
        """Attach this response to a transport envelope."""
        from devicereg.envelope import to_envelope

        return to_envelope(self, envelope)

    @classmethod
    def from_envelope(
        cls,
        envelope: Mapping[str, Any] | None,
        *,
        require_codes: bool | None = None,
    ) -> "DeviceRegistrationResponse | None":
        """Extract a response attached by to_envelope(), if any."""
        from devicereg.envelope import from_envelope

        return from_envelope(envelope, require_codes=require_codes)

    def create_activation_request(
        self, activation_endpoint: str
    ) -> "DeviceActivationRequest":
        """Create the follow-up request exchanging the activation code."""
        from devicereg.followup import create_activation_request

        return create_activation_request(self, activation_endpoint)

    def to_authorization_response(self, client_id: str) -> "AuthorizationResponse":
        """Translate into a plain OAuth2 authorization response."""
        from devicereg.compat import to_authorization_response

        return to_authorization_response(self, client_id)
