"""Device Registration Request Model."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from devicereg.errors import InvalidStateError
from devicereg.models.authorization import AuthorizationRequest
from devicereg.models.configuration import AuthorizationServiceConfiguration
from devicereg.utils.pkce import generate_code_challenge, generate_code_verifier
from devicereg.utils.security import generate_state

BUILT_IN_PARAMS = frozenset(
    {"response_type", "redirect_uri", "state", "template", "device_name", "user_device"}
)


class DeviceRegistrationRequest(BaseModel):
    """
    Request to register a device with the authorization server.

    The server answers by redirecting to redirect_uri with either an
    authorization code, an activation code, or both.

    Attributes:
        configuration: Authorization server endpoints
        redirect_uri: URI the server redirects to (custom schemes allowed)
        template: Client template the device is registered under
        device_name: Human-readable device name (optional)
        user_device: Application-chosen device identifier (optional)
        state: Correlation token echoed back by the server
        additional_parameters: Extra query parameters for the registration call
    """

    model_config = ConfigDict(frozen=True)

    configuration: AuthorizationServiceConfiguration
    redirect_uri: str = Field(..., min_length=1, description="Redirect URI")
    template: str = Field(..., min_length=1, description="Client template name")
    device_name: str | None = Field(None, description="Device name")
    user_device: str | None = Field(None, description="Device identifier")
    state: str | None = Field(
        default_factory=generate_state, description="Correlation state"
    )
    additional_parameters: tuple[tuple[str, str], ...] = Field(
        default=(), description="Extra registration parameters as (name, value) pairs"
    )

    @field_validator("additional_parameters", mode="before")
    @classmethod
    def freeze_params(cls, v: Any) -> Any:
        """Accept a mapping and store it as immutable pairs."""
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @field_validator("additional_parameters")
    @classmethod
    def reject_built_in_params(
        cls, v: tuple[tuple[str, str], ...]
    ) -> tuple[tuple[str, str], ...]:
        """Additional parameters must not shadow the built-in ones."""
        names = [name for name, _ in v]
        if len(set(names)) != len(names):
            raise ValueError("Additional parameters must have unique names")
        clashes = sorted(BUILT_IN_PARAMS.intersection(names))
        if clashes:
            raise ValueError(
                f"Additional parameters cannot override built-in parameters: {clashes}"
            )
        return v

    @field_serializer("additional_parameters")
    def serialize_params(self, v: tuple[tuple[str, str], ...]) -> dict[str, str]:
        return dict(v)

    def serialize(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting absent fields."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def deserialize(cls, data: dict[str, Any]) -> "DeviceRegistrationRequest":
        """
        Rebuild a request from serialize() output.

        A serialized request without a state stays stateless; no new state
        is generated on the way back in.

        Raises:
            pydantic.ValidationError: If the data is not a valid request
        """
        if isinstance(data, dict) and "state" not in data:
            data = {**data, "state": None}
        return cls.model_validate(data)

    def to_uri(self) -> str:
        """
        Build the registration URL the user agent is sent to.

        Returns:
            str: Registration URL

        Raises:
            InvalidStateError: If the configuration has no registration endpoint
        """
        endpoint = self.configuration.registration_endpoint
        if endpoint is None:
            raise InvalidStateError(
                "registration endpoint not available in service configuration"
            )

        params = {
            "response_type": "code",
            "redirect_uri": self.redirect_uri,
            "template": self.template,
        }
        if self.state is not None:
            params["state"] = self.state
        if self.device_name is not None:
            params["device_name"] = self.device_name
        if self.user_device is not None:
            params["user_device"] = self.user_device
        params.update(self.additional_parameters)

        return f"{endpoint}?{urlencode(params)}"

    def to_authorization_request(self, client_id: str) -> AuthorizationRequest:
        """
        Build a plain authorization request for client_id.

        The result shares this request's configuration, redirect URI and
        state, and carries a fresh PKCE verifier.

        Args:
            client_id: OAuth client ID obtained for the registered device

        Returns:
            AuthorizationRequest: Base authorization request
        """
        code_verifier = generate_code_verifier()
        return AuthorizationRequest(
            configuration=self.configuration,
            client_id=client_id,
            redirect_uri=self.redirect_uri,
            state=self.state,
            code_verifier=code_verifier,
            code_challenge=generate_code_challenge(code_verifier),
        )
