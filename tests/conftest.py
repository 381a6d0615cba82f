# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_grant

import json
from typing import Any

import pytest
from pydantic import SecretStr

from coreason_grant.models import (
    AuthConfig,
    ClientIdentity,
    Credentials,
    EndpointConfig,
    TokenRequest,
    TransportResponse,
)


class StubTransport:
    """
    Call-counting TokenTransport returning a canned TransportResponse.
    """

    def __init__(self, response: TransportResponse | None = None, raises: Exception | None = None) -> None:
        self.response = response or TransportResponse(body=b"{}", status_code=200)
        self.raises = raises
        self.calls: list[TokenRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def perform_request(self, request: TokenRequest) -> TransportResponse:
        self.calls.append(request)
        if self.raises:
            raise self.raises
        return self.response


def json_response(payload: Any, status_code: int = 200) -> TransportResponse:
    return TransportResponse(body=json.dumps(payload).encode("utf-8"), status_code=status_code)


TOKEN_PAYLOAD = {"access_token": "at-123", "token_type": "Bearer", "expires_in": 3600}


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="alice", password=SecretStr("p@ss"))


@pytest.fixture
def public_client() -> ClientIdentity:
    return ClientIdentity(client_id="cid")


@pytest.fixture
def confidential_client() -> ClientIdentity:
    return ClientIdentity(client_id="cid", client_secret=SecretStr("s3cret"))


@pytest.fixture
def header_auth() -> AuthConfig:
    return AuthConfig(secret_in_body=False)


@pytest.fixture
def body_auth() -> AuthConfig:
    return AuthConfig(secret_in_body=True)


@pytest.fixture
def endpoints() -> EndpointConfig:
    return EndpointConfig(
        authorize_url="https://auth.example.com/oauth/authorize",
        token_url="https://auth.example.com/oauth/token",
    )
