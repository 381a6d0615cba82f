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
GrantController component: entry point of the authorization flow for a grant.
"""

from collections.abc import Callable, Mapping
from typing import Any

from coreason_grant.completion import OneShot
from coreason_grant.exceptions import CoreasonGrantError, GrantErrorKind
from coreason_grant.exchanger import TokenExchanger
from coreason_grant.grants import GrantStrategy
from coreason_grant.models import (
    AuthConfig,
    ClientIdentity,
    EndpointConfig,
    GrantState,
    TokenFailure,
    TokenResult,
    TokenSuccess,
)
from coreason_grant.utils.logger import logger

CompletionCallback = Callable[[dict[str, Any] | None, Exception | None], Any]

_FAILURE_STATES = {
    GrantErrorKind.RESPONSE_ERROR: GrantState.REJECTED,
    GrantErrorKind.RESPONSE_PARSE_ERROR: GrantState.PARSE_FAILED,
}


class GrantController:
    """
    Drives a grant strategy and a token exchanger, and forwards the outcome to the flow's continuations.

    Client identity and configuration are explicit read-only inputs; the controller never mutates them.
    No retries happen here and every invocation performs at most one network round trip.

    Attributes:
        strategy (GrantStrategy): Builds the token request.
        client_identity (ClientIdentity): The client's id and secret.
        auth_config (AuthConfig): Selects the client authentication mode.
        endpoint_config (EndpointConfig): Token endpoint and scope.
        exchanger (TokenExchanger): Executes and classifies the round trip.
        state (GrantState): Where the most recent invocation is in its lifecycle.
    """

    def __init__(
        self,
        strategy: GrantStrategy,
        client_identity: ClientIdentity,
        auth_config: AuthConfig,
        endpoint_config: EndpointConfig,
        exchanger: TokenExchanger,
        on_authorized: Callable[[dict[str, Any]], Any] | None = None,
        on_failed: Callable[[Exception], Any] | None = None,
    ) -> None:
        self.strategy = strategy
        self.client_identity = client_identity
        self.auth_config = auth_config
        self.endpoint_config = endpoint_config
        self.exchanger = exchanger
        self.on_authorized = on_authorized
        self.on_failed = on_failed
        self.state = GrantState.IDLE

    async def obtain_access_token(self, extra_params: Mapping[str, str] | None = None) -> TokenResult:
        """
        Builds the token request and exchanges it.

        Builder failures short-circuit before the transport is touched.

        Args:
            extra_params: Additional body parameters.

        Returns:
            TokenResult: Exactly one success or failure.
        """
        self.state = GrantState.VALIDATING
        try:
            request = self.strategy.build_request(
                self.client_identity, self.auth_config, self.endpoint_config, extra_params
            )
        except CoreasonGrantError as e:
            logger.warning(f"Could not build {self.strategy.grant_type} token request: {e}")
            self.state = GrantState.FAILED
            return TokenFailure(kind=e.kind, error=e)

        self.state = GrantState.SENDING
        result = await self.exchanger.exchange(request)

        if isinstance(result, TokenSuccess):
            self.state = GrantState.SUCCESS
        else:
            self.state = _FAILURE_STATES.get(result.kind, GrantState.FAILED)
        return result

    async def authorize(
        self,
        extra_params: Mapping[str, str] | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> TokenResult:
        """
        Runs the grant and signals the outcome exactly once.

        On success `on_authorized(payload)` and `on_complete(payload, None)` are called.
        On failure `on_failed(error)` and `on_complete(payload, error)` are called, where
        payload is the parsed error body for HTTP rejections and None otherwise.
        `on_complete` is still delivered when a continuation raises; the continuation's
        exception then propagates.

        Args:
            extra_params: Additional body parameters.
            on_complete: Completion callback for this invocation.

        Returns:
            TokenResult: The same result that was delivered to the callbacks.
        """
        complete = OneShot(on_complete) if on_complete else None
        result = await self.obtain_access_token(extra_params)

        if isinstance(result, TokenSuccess):
            payload = result.payload or {}
            try:
                if self.on_authorized:
                    self.on_authorized(payload)
            finally:
                if complete:
                    complete(payload, None)
        else:
            try:
                if self.on_failed:
                    self.on_failed(result.error)
            finally:
                if complete:
                    complete(result.payload, result.error)
        return result
