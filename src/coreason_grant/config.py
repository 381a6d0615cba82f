# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_grant

"""
Configuration for the coreason-grant package.
"""

from urllib.parse import urlparse

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coreason_grant.models import AuthConfig, ClientIdentity, EndpointConfig


class CoreasonGrantConfig(BaseSettings):
    """
    Configuration settings for coreason-grant.

    Attributes:
        authorize_url (str): The authorization endpoint. Used as token endpoint when token_url is unset.
        token_url (str | None): The token endpoint.
        scope (str | None): Space separated scopes to request.
        client_id (str | None): The OAuth2 client id.
        client_secret (SecretStr | None): The client secret. Leave unset for public clients.
        secret_in_body (bool): Send the client credentials in the body instead of a Basic header.
        http_timeout (float): Timeout in seconds for the token request.
        max_response_bytes (int): Maximum accepted token response size.
        unsafe_local_dev (bool): Allow plain http:// endpoints. Local testing only.
    """

    model_config = SettingsConfigDict(
        env_prefix="COREASON_GRANT_",
        case_sensitive=False,
    )

    unsafe_local_dev: bool = False
    authorize_url: str
    token_url: str | None = None
    scope: str | None = None
    client_id: str | None = None
    client_secret: SecretStr | None = None
    secret_in_body: bool = False
    http_timeout: float = Field(default=30.0, gt=0, description="Timeout in seconds for the token request.")
    max_response_bytes: int = Field(default=1_000_000, gt=0)

    @field_validator("authorize_url", "token_url", mode="after")
    @classmethod
    def validate_https(cls, v: str | None, info: ValidationInfo) -> str | None:
        """
        Ensures endpoints use HTTPS, unless strictly opted out for local dev.
        Credentials are posted to these URLs.
        """
        if v is None:
            return v

        parsed = urlparse(v.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid endpoint URL: {v!r}")
        if parsed.scheme == "http" and not info.data.get("unsafe_local_dev", False):
            raise ValueError("HTTPS is required for production. Set 'unsafe_local_dev=True' only for local testing.")
        return v.strip()

    def client_identity(self) -> ClientIdentity:
        return ClientIdentity(client_id=self.client_id, client_secret=self.client_secret)

    def auth_config(self) -> AuthConfig:
        return AuthConfig(secret_in_body=self.secret_in_body)

    def endpoint_config(self) -> EndpointConfig:
        return EndpointConfig(authorize_url=self.authorize_url, token_url=self.token_url, scope=self.scope)
