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
Grant strategies. The generic flow holds a GrantStrategy value and asks it for the token request.
"""

from collections.abc import Mapping
from typing import Protocol

from coreason_grant.models import AuthConfig, ClientIdentity, Credentials, EndpointConfig, TokenRequest
from coreason_grant.request_builder import build_token_request


class GrantStrategy(Protocol):
    """Protocol for an OAuth2 grant that can build its token endpoint request."""

    @property
    def grant_type(self) -> str: ...

    def build_request(
        self,
        client_identity: ClientIdentity,
        auth_config: AuthConfig,
        endpoint_config: EndpointConfig,
        extra_params: Mapping[str, str] | None = None,
    ) -> TokenRequest:
        """
        Builds the token request for this grant.
        Must fail before any I/O when required inputs are missing.
        """
        ...


class PasswordGrant:
    """
    Resource owner password credentials grant (RFC 6749, section 4.3).

    Owns the credentials for the duration of one exchange. Instances must not be
    shared between overlapping authorize calls.
    """

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials

    @property
    def grant_type(self) -> str:
        return "password"

    def build_request(
        self,
        client_identity: ClientIdentity,
        auth_config: AuthConfig,
        endpoint_config: EndpointConfig,
        extra_params: Mapping[str, str] | None = None,
    ) -> TokenRequest:
        return build_token_request(self.credentials, client_identity, auth_config, endpoint_config, extra_params)
