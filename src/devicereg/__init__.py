"""
devicereg: device registration / activation extension for OAuth2 clients.

Parses the registration response returned on a redirect URI, carries it
across a transport envelope, and derives the follow-up activation request.
"""

from devicereg.codec import deserialize_response, serialize_response
from devicereg.compat import to_authorization_response
from devicereg.envelope import ENVELOPE_KEY, from_envelope, to_envelope
from devicereg.errors import (
    DeviceRegistrationError,
    InvalidArgumentError,
    InvalidEnvelopeContentError,
    InvalidStateError,
    MalformedResponseError,
)
from devicereg.followup import create_activation_request
from devicereg.models import (
    AuthorizationRequest,
    AuthorizationResponse,
    AuthorizationServiceConfiguration,
    DeviceActivationRequest,
    DeviceRegistrationRequest,
    DeviceRegistrationResponse,
)

__all__ = [
    "ENVELOPE_KEY",
    "AuthorizationRequest",
    "AuthorizationResponse",
    "AuthorizationServiceConfiguration",
    "DeviceActivationRequest",
    "DeviceRegistrationError",
    "DeviceRegistrationRequest",
    "DeviceRegistrationResponse",
    "InvalidArgumentError",
    "InvalidEnvelopeContentError",
    "InvalidStateError",
    "MalformedResponseError",
    "create_activation_request",
    "deserialize_response",
    "from_envelope",
    "serialize_response",
    "to_authorization_response",
    "to_envelope",
]
