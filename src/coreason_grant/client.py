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
Client facades wiring configuration, transport and the password grant together.
"""

from collections.abc import Mapping
from typing import Any

import anyio
import httpx
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from pydantic import SecretStr

from coreason_grant.config import CoreasonGrantConfig
from coreason_grant.controller import GrantController
from coreason_grant.exchanger import TokenExchanger
from coreason_grant.grants import PasswordGrant
from coreason_grant.models import Credentials, TokenResponse, TokenResult, TokenSuccess
from coreason_grant.transport import HTTPXTokenTransport


class PasswordGrantClientAsync:
    """
    Async client for the resource owner password credentials grant.
    Handles resources via async context manager.
    """

    def __init__(self, config: CoreasonGrantConfig, client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize the PasswordGrantClientAsync.

        Args:
            config: The configuration object.
            client: External async client (optional). If not provided, one is created and owned by this instance.
        """
        self.config = config
        self._internal_client = client is None

        if client:
            self._client = client
        else:
            self._client = httpx.AsyncClient(timeout=self.config.http_timeout)

        # Instrument the client for distributed tracing
        HTTPXClientInstrumentor().instrument_client(self._client)

        self.exchanger = TokenExchanger(
            HTTPXTokenTransport(self._client, max_response_bytes=self.config.max_response_bytes)
        )

    async def __aenter__(self) -> "PasswordGrantClientAsync":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._internal_client:
            await self._client.aclose()

    def controller(self, username: str, password: str) -> GrantController:
        """
        Returns a GrantController for one exchange with the given resource owner credentials.
        """
        grant = PasswordGrant(Credentials(username=username, password=SecretStr(password)))
        return GrantController(
            strategy=grant,
            client_identity=self.config.client_identity(),
            auth_config=self.config.auth_config(),
            endpoint_config=self.config.endpoint_config(),
            exchanger=self.exchanger,
        )

    async def authorize(
        self, username: str, password: str, params: Mapping[str, str] | None = None
    ) -> TokenResult:
        """
        Requests an access token with the resource owner's credentials.

        Args:
            username: The resource owner's username.
            password: The resource owner's password.
            params: Additional token request parameters.

        Returns:
            TokenResult: TokenSuccess or TokenFailure. Grant failures are not raised.
        """
        return await self.controller(username, password).authorize(params)

    async def fetch_token(
        self, username: str, password: str, params: Mapping[str, str] | None = None
    ) -> TokenResponse:
        """
        Requests an access token and returns it as a TokenResponse.

        Returns:
            TokenResponse: The issued token.

        Raises:
            CoreasonGrantError: The classified failure (e.g. ResponseError, MissingUsernameError).
            Exception: Transport errors are raised unmodified (e.g. httpx.ConnectTimeout).
        """
        result = await self.authorize(username, password, params)
        if isinstance(result, TokenSuccess):
            return result.token()
        raise result.error


class PasswordGrantClient:
    """
    Sync facade for PasswordGrantClientAsync.
    Each call runs in its own event loop with a freshly created HTTP client.
    """

    def __init__(self, config: CoreasonGrantConfig) -> None:
        self.config = config

    async def _authorize(self, username: str, password: str, params: Mapping[str, str] | None) -> TokenResult:
        async with PasswordGrantClientAsync(self.config) as client:
            return await client.authorize(username, password, params)

    async def _fetch_token(self, username: str, password: str, params: Mapping[str, str] | None) -> TokenResponse:
        async with PasswordGrantClientAsync(self.config) as client:
            return await client.fetch_token(username, password, params)

    def authorize(self, username: str, password: str, params: Mapping[str, str] | None = None) -> TokenResult:
        return anyio.run(self._authorize, username, password, params)

    def fetch_token(self, username: str, password: str, params: Mapping[str, str] | None = None) -> TokenResponse:
        return anyio.run(self._fetch_token, username, password, params)
