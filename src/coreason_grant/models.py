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
Data models for the coreason-grant package.
"""

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from coreason_grant.exceptions import GrantErrorKind, ResponseParseError


class GrantState(StrEnum):
    IDLE = "idle"
    VALIDATING = "validating"
    SENDING = "sending"
    SUCCESS = "success"
    REJECTED = "rejected"
    PARSE_FAILED = "parse_failed"
    FAILED = "failed"


class Credentials(BaseModel):
    """
    The resource owner's credentials for a single exchange.

    Empty values are accepted here; the request builder rejects them so that
    callers receive MissingUsernameError / MissingPasswordError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    username: str = ""
    password: SecretStr = SecretStr("")

    def __repr__(self) -> str:
        # The username is PII, the password a secret
        return "Credentials(username='<REDACTED>', password=SecretStr('**********'))"

    def __str__(self) -> str:
        return self.__repr__()


class ClientIdentity(BaseModel):
    """
    The OAuth2 client's identity as registered with the authorization server.

    Attributes:
        client_id (str | None): The client identifier.
        client_secret (SecretStr | None): The client secret. Absent for public clients.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: str | None = None
    client_secret: SecretStr | None = None


class AuthConfig(BaseModel):
    """
    Selects how the client authenticates to the token endpoint.

    Attributes:
        secret_in_body (bool): Send client_id/client_secret as body parameters instead of a Basic header.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    secret_in_body: bool = False


class EndpointConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    authorize_url: str = Field(..., description="The authorization endpoint. Used as token endpoint if token_url is unset.")
    token_url: str | None = Field(default=None, description="The token endpoint URL.")
    scope: str | None = Field(default=None, description="Space separated scopes to request.")

    @property
    def token_endpoint(self) -> str:
        return self.token_url or self.authorize_url


class TokenRequest(BaseModel):
    """
    A fully built token endpoint request. Immutable once built.

    Headers are kept as an ordered tuple of pairs so that building twice from
    the same inputs yields identical requests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: Literal["POST"] = "POST"
    url: str
    headers: tuple[tuple[str, str], ...]
    body: str

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    def headers_dict(self) -> dict[str, str]:
        return dict(self.headers)

    @property
    def content(self) -> bytes:
        return self.body.encode("utf-8")

    def __repr__(self) -> str:
        # Body and Authorization header carry credentials
        return f"TokenRequest(method={self.method!r}, url={self.url!r}, headers=<{len(self.headers)} headers>)"

    def __str__(self) -> str:
        return self.__repr__()


class TransportResponse(BaseModel):
    """
    The outcome reported by a transport: body bytes when anything was received,
    the HTTP status, and the transport-level error if the round trip failed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    body: bytes | None = None
    status_code: int = 0
    error: Exception | None = None


class TokenResponse(BaseModel):
    """
    Typed view of a successful token endpoint response (RFC 6749, section 5.1).

    Attributes:
        access_token (str): The access token issued by the authorization server.
        token_type (str): The type of the token (e.g. "Bearer").
        expires_in (int | None): The lifetime in seconds of the access token.
        refresh_token (str | None): The refresh token, if issued.
        scope (str | None): The granted scope, if it differs from the requested one.
        id_token (str | None): The ID token, if issued.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None
    id_token: str | None = None

    def __repr__(self) -> str:
        return (
            f"TokenResponse(access_token='<REDACTED>', "
            f"token_type={self.token_type!r}, "
            f"expires_in={self.expires_in!r}, "
            f"scope={self.scope!r})"
        )

    def __str__(self) -> str:
        return self.__repr__()


class TokenSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    payload: dict[str, Any] = Field(default_factory=dict)

    def token(self) -> TokenResponse:
        """
        Returns the payload as a TokenResponse.

        Raises:
            ResponseParseError: If the payload lacks a usable access_token.
        """
        try:
            return TokenResponse(**self.payload)
        except (TypeError, ValueError) as e:
            raise ResponseParseError(f"Invalid token response: {e}") from e


class TokenFailure(BaseModel):
    """
    A failed exchange.

    Attributes:
        kind (GrantErrorKind): The classified failure kind.
        error (Exception): The error; transport errors are carried unmodified.
        payload (dict[str, Any] | None): The parsed body for HTTP rejections, otherwise None.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: Literal[False] = False
    kind: GrantErrorKind
    error: Exception
    payload: dict[str, Any] | None = None

    @property
    def message(self) -> str:
        return str(self.error)


TokenResult = TokenSuccess | TokenFailure
