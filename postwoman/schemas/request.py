"""
Pydantic schemas for HTTP request configurations.

``RequestConfig`` is the full description of one HTTP call and is what the
executor and the code generators consume. The remaining schemas wrap it for
the create/update/read endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .enums import AuthType, BodyType, HTTPMethod
from .key_value import KeyValuePair


class OAuthConfig(BaseModel):
    """Stored OAuth 2.0 settings. Kept for round-tripping only; no flow uses them."""
    authorization_url: str = ""
    token_url: str = ""
    client_id: str = ""
    client_secret: str = ""
    scope: str = ""
    redirect_uri: str = ""


class RequestConfig(BaseModel):
    """
    Everything needed to send one HTTP request.

    Attributes:
        name: Display name
        url: Target URL, sent as written (no placeholder substitution)
        method: HTTP method
        headers: Ordered header pairs; only enabled pairs with a key are sent
        query_params: Ordered query pairs; only enabled pairs with a key are sent
        body_type: How the body is labelled; NONE means no body is sent
        body_content: Raw body text
        auth_type: Authentication scheme; overrides any Authorization header
        auth_bearer_token: Token for Bearer auth
        auth_basic_username: Username for Basic auth
        auth_basic_password: Password for Basic auth (may be empty)
        auth_oauth_config: Stored OAuth 2.0 settings
    """
    name: str = "Untitled Request"
    url: str = ""
    method: HTTPMethod = HTTPMethod.GET
    headers: list[KeyValuePair] = []
    query_params: list[KeyValuePair] = []
    body_type: BodyType = BodyType.NONE
    body_content: str = ""
    auth_type: AuthType = AuthType.NONE
    auth_bearer_token: str | None = None
    auth_basic_username: str | None = None
    auth_basic_password: str | None = None
    auth_oauth_config: OAuthConfig | None = None

    @property
    def has_body(self) -> bool:
        """True when a body will actually be sent."""
        return self.body_type is not BodyType.NONE and bool(self.body_content)


class RequestCreate(RequestConfig):
    """Schema for creating a new saved request."""
    folder_id: int | None = None


class RequestUpdate(BaseModel):
    """Schema for updating an existing request. All fields are optional."""
    name: str | None = None
    url: str | None = None
    method: HTTPMethod | None = None
    headers: list[KeyValuePair] | None = None
    query_params: list[KeyValuePair] | None = None
    body_type: BodyType | None = None
    body_content: str | None = None
    auth_type: AuthType | None = None
    auth_bearer_token: str | None = None
    auth_basic_username: str | None = None
    auth_basic_password: str | None = None
    auth_oauth_config: OAuthConfig | None = None
    folder_id: int | None = None
    sort_order: int | None = None


class RequestResponse(RequestConfig):
    """Schema for a saved request with all system-generated fields."""
    id: int
    folder_id: int | None
    sort_order: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReorderRequests(BaseModel):
    """Schema for reordering requests."""
    request_ids: list[int]
