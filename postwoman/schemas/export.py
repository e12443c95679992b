"""
Pydantic schemas for the collection export format.

The document is camelCase JSON:

    {"version": "1.0", "exportDate": "<iso8601>",
     "folder": {"name": "...", "requests": [{...}, ...]}}

Identity fields (ids, folder back-references, timestamps) are not part of
a request entry; an ``id`` inside a header or query pair is carried but
never reused as a database identity.
"""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import AuthType, BodyType, HTTPMethod
from .key_value import KeyValuePair
from .request import OAuthConfig, RequestConfig


class _ExportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExportableKeyValuePair(_ExportModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    key: str
    value: str
    is_enabled: bool = True

    @classmethod
    def from_pair(cls, pair: KeyValuePair) -> "ExportableKeyValuePair":
        return cls(id=pair.id, key=pair.key, value=pair.value, is_enabled=pair.is_enabled)

    def to_pair(self) -> KeyValuePair:
        return KeyValuePair(id=self.id, key=self.key, value=self.value, is_enabled=self.is_enabled)


class ExportableOAuthConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    authorization_url: str = Field("", alias="authorizationURL")
    token_url: str = Field("", alias="tokenURL")
    client_id: str = Field("", alias="clientID")
    client_secret: str = Field("", alias="clientSecret")
    scope: str = ""
    redirect_uri: str = Field("", alias="redirectURI")


class ExportableRequest(_ExportModel):
    """A request entry: the request configuration minus identity fields."""
    name: str
    url: str
    method: HTTPMethod
    headers: list[ExportableKeyValuePair]
    query_params: list[ExportableKeyValuePair]
    body_type: BodyType
    body_content: str
    authentication_type: AuthType
    auth_bearer_token: str | None = None
    auth_basic_username: str | None = None
    auth_basic_password: str | None = None
    auth_oauth_config: ExportableOAuthConfig | None = Field(None, alias="authOAuthConfig")

    @classmethod
    def from_config(cls, config: RequestConfig) -> "ExportableRequest":
        oauth = config.auth_oauth_config
        return cls(
            name=config.name,
            url=config.url,
            method=config.method,
            headers=[ExportableKeyValuePair.from_pair(p) for p in config.headers],
            query_params=[ExportableKeyValuePair.from_pair(p) for p in config.query_params],
            body_type=config.body_type,
            body_content=config.body_content,
            authentication_type=config.auth_type,
            auth_bearer_token=config.auth_bearer_token,
            auth_basic_username=config.auth_basic_username,
            auth_basic_password=config.auth_basic_password,
            auth_oauth_config=(
                ExportableOAuthConfig(**oauth.model_dump()) if oauth is not None else None
            ),
        )

    def to_config(self) -> RequestConfig:
        oauth = self.auth_oauth_config
        return RequestConfig(
            name=self.name,
            url=self.url,
            method=self.method,
            headers=[p.to_pair() for p in self.headers],
            query_params=[p.to_pair() for p in self.query_params],
            body_type=self.body_type,
            body_content=self.body_content,
            auth_type=self.authentication_type,
            auth_bearer_token=self.auth_bearer_token,
            auth_basic_username=self.auth_basic_username,
            auth_basic_password=self.auth_basic_password,
            auth_oauth_config=(
                OAuthConfig(**oauth.model_dump()) if oauth is not None else None
            ),
        )


class ExportableFolder(_ExportModel):
    name: str
    requests: list[ExportableRequest]


class ExportContainer(_ExportModel):
    version: str
    export_date: datetime
    folder: ExportableFolder
