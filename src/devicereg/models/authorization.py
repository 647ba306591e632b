"""
Plain OAuth2 authorization request/response models.

These are the types consumed by a standard authorization-code client. A
device registration response can be translated into them through
devicereg.compat, which is the only module that couples the two.
"""

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from devicereg.models.configuration import AuthorizationServiceConfiguration
from devicereg.utils.pkce import CODE_CHALLENGE_METHOD_S256


class AuthorizationRequest(BaseModel):
    """
    Authorization request parameters for the authorization-code flow.

    Attributes:
        configuration: Authorization server endpoints
        client_id: OAuth client identifier
        response_type: OAuth response type
        redirect_uri: Redirect URI registered for the client
        state: State for CSRF validation
        scope: Space-separated scopes (optional)
        code_verifier: PKCE code verifier (kept client-side)
        code_challenge: PKCE code challenge
        code_challenge_method: PKCE challenge method
    """

    model_config = ConfigDict(frozen=True)

    configuration: AuthorizationServiceConfiguration
    client_id: str = Field(..., min_length=1, description="OAuth client ID")
    response_type: str = Field(default="code", description="OAuth response type")
    redirect_uri: str = Field(..., min_length=1, description="Redirect URI")
    state: str | None = Field(None, description="State for CSRF validation")
    scope: str | None = Field(None, description="Requested scopes")
    code_verifier: str | None = Field(None, description="PKCE code verifier")
    code_challenge: str | None = Field(None, description="PKCE code challenge")
    code_challenge_method: str | None = Field(
        CODE_CHALLENGE_METHOD_S256, description="PKCE challenge method"
    )

    def to_uri(self) -> str:
        """
        Build the complete authorization URL.

        Returns:
            str: Authorization URL for user redirect
        """
        params = {
            "client_id": self.client_id,
            "response_type": self.response_type,
            "redirect_uri": self.redirect_uri,
        }
        if self.state:
            params["state"] = self.state
        if self.scope:
            params["scope"] = self.scope
        if self.code_challenge:
            params["code_challenge"] = self.code_challenge
            params["code_challenge_method"] = self.code_challenge_method or ""

        return f"{self.configuration.authorization_endpoint}?{urlencode(params)}"


class AuthorizationResponse(BaseModel):
    """Result of an authorization request, as seen by an OAuth2 client."""

    model_config = ConfigDict(frozen=True)

    request: AuthorizationRequest
    authorization_code: str | None = Field(None, description="Authorization code")

    @classmethod
    def from_request(
        cls,
        request: AuthorizationRequest,
        authorization_code: str | None = None,
    ) -> "AuthorizationResponse":
        """Build a response for request, optionally carrying a code."""
        return cls(
            request=request,
            authorization_code=authorization_code,
        )
