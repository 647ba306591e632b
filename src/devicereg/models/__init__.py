"""
Models package.

Frozen pydantic models for the device registration flow and the plain
OAuth2 types it can be translated into.
"""

from devicereg.models.activation_request import DeviceActivationRequest
from devicereg.models.authorization import AuthorizationRequest, AuthorizationResponse
from devicereg.models.configuration import AuthorizationServiceConfiguration
from devicereg.models.registration_request import DeviceRegistrationRequest
from devicereg.models.registration_response import DeviceRegistrationResponse

__all__ = [
    "AuthorizationRequest",
    "AuthorizationResponse",
    "AuthorizationServiceConfiguration",
    "DeviceActivationRequest",
    "DeviceRegistrationRequest",
    "DeviceRegistrationResponse",
]
