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
TokenExchanger component: one round trip to the token endpoint and classification of its outcome.
"""

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from coreason_grant.exceptions import NoDataInResponseError, ResponseError, ResponseParseError, classify_error
from coreason_grant.models import TokenFailure, TokenRequest, TokenResult, TokenSuccess, TransportResponse
from coreason_grant.parsing import JSONResponseParser, ResponseParser
from coreason_grant.transport import TokenTransport
from coreason_grant.utils.logger import logger

tracer = trace.get_tracer(__name__)


class TokenExchanger:
    """
    Sends a built TokenRequest through a transport and turns the outcome into a TokenResult.

    HTTP status is interpreted here, not by the transport: a 4xx/5xx response is a
    transport success but a grant failure.

    Attributes:
        transport (TokenTransport): Executes the HTTP round trip.
        parser (ResponseParser): Parses the response body.
    """

    def __init__(self, transport: TokenTransport, parser: ResponseParser | None = None) -> None:
        self.transport = transport
        self.parser = parser or JSONResponseParser()

    async def exchange(self, request: TokenRequest) -> TokenResult:
        """
        Performs the exchange. Never raises for grant failures; exactly one result is returned.

        Args:
            request: The request built by a grant strategy.

        Returns:
            TokenSuccess with the parsed payload if the status is below 400, otherwise TokenFailure.
        """
        with tracer.start_as_current_span("token_exchange") as span:
            span.set_attribute("http.url", request.url)
            logger.info(f"Requesting new access token from {request.url}")

            try:
                response = await self.transport.perform_request(request)
            except Exception as e:
                logger.error(f"Transport raised during token request: {e!r}")
                response = TransportResponse(body=None, status_code=0, error=e)

            span.set_attribute("http.status_code", response.status_code)
            result = self._classify(response)

            if isinstance(result, TokenFailure):
                span.set_status(Status(StatusCode.ERROR, result.kind))
            return result

    def _classify(self, response: TransportResponse) -> TokenResult:
        if response.body is None:
            error = response.error or NoDataInResponseError()
            return TokenFailure(kind=classify_error(error), error=error)

        try:
            payload = self.parser.parse(response.body)
        except ResponseParseError as e:
            logger.error(f"Error parsing response: {e}")
            return TokenFailure(kind=e.kind, error=e)
        except Exception as e:
            # Third-party parsers may raise their own errors
            logger.error(f"Error parsing response: {e!r}")
            parse_error = ResponseParseError(f"Failed to parse token response: {e}")
            parse_error.__cause__ = e
            return TokenFailure(kind=parse_error.kind, error=parse_error)

        if not isinstance(payload, dict):
            logger.error(f"Response parser returned {type(payload).__name__}, expected a JSON object")
            parse_error = ResponseParseError("Token response is not a JSON object")
            return TokenFailure(kind=parse_error.kind, error=parse_error)

        if response.status_code < 400:
            logger.info(f"Did get access token [{'access_token' in payload}]")
            return TokenSuccess(payload=payload)

        rejection = ResponseError(status_code=response.status_code, payload=payload)
        logger.warning(
            f"Token endpoint rejected the request with status {response.status_code} "
            f"(error={rejection.error_code!r})"
        )
        return TokenFailure(kind=rejection.kind, error=rejection, payload=payload)
