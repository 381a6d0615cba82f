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
Transports for executing token requests.
"""

from typing import Protocol

import httpx

from coreason_grant.exceptions import OversizedResponseError
from coreason_grant.models import TokenRequest, TransportResponse
from coreason_grant.utils.logger import logger

DEFAULT_MAX_RESPONSE_BYTES = 1_000_000


class TokenTransport(Protocol):
    """
    Protocol for the HTTP round trip.

    Implementations complete exactly once per call. A response with any status
    code is a transport-level success; only failures to obtain a response are
    reported through `TransportResponse.error`.
    """

    async def perform_request(self, request: TokenRequest) -> TransportResponse: ...


class HTTPXTokenTransport:
    """
    TokenTransport backed by an `httpx.AsyncClient`.

    The body is streamed and capped at `max_response_bytes` to avoid unbounded
    reads from a misbehaving server. Redirects are not followed, so credentials
    are only ever posted to the configured endpoint.

    Attributes:
        client (httpx.AsyncClient): The async HTTP client to use for requests.
        max_response_bytes (int): Maximum accepted response size.
    """

    def __init__(self, client: httpx.AsyncClient, max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES) -> None:
        self.client = client
        self.max_response_bytes = max_response_bytes

    async def perform_request(self, request: TokenRequest) -> TransportResponse:
        try:
            async with self.client.stream(
                request.method,
                request.url,
                content=request.content,
                headers=request.headers_dict(),
                follow_redirects=False,
            ) as response:
                content_length = response.headers.get("Content-Length")
                if content_length:
                    try:
                        if int(content_length) > self.max_response_bytes:
                            raise OversizedResponseError("Response too large")
                    except ValueError:
                        pass

                content = bytearray()
                async for chunk in response.aiter_bytes():
                    content.extend(chunk)
                    if len(content) > self.max_response_bytes:
                        raise OversizedResponseError("Response too large")

                return TransportResponse(body=bytes(content), status_code=response.status_code)
        except (httpx.HTTPError, OversizedResponseError) as e:
            logger.warning(f"Token request to {request.url} failed: {e!r}")
            return TransportResponse(body=None, status_code=0, error=e)
