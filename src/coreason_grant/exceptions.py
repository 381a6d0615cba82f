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
Custom exceptions for the coreason-grant package.
"""

from enum import StrEnum
from typing import Any


class GrantErrorKind(StrEnum):
    MISSING_USERNAME = "missing_username"
    MISSING_PASSWORD = "missing_password"
    MISSING_CLIENT_ID = "missing_client_id"
    ENCODING_ERROR = "encoding_error"
    NO_DATA_IN_RESPONSE = "no_data_in_response"
    RESPONSE_PARSE_ERROR = "response_parse_error"
    RESPONSE_ERROR = "response_error"
    TRANSPORT_ERROR = "transport_error"


class CoreasonGrantError(Exception):
    """Base exception for all coreason-grant errors."""

    kind: GrantErrorKind = GrantErrorKind.TRANSPORT_ERROR


class MissingUsernameError(CoreasonGrantError):
    """Raised when the resource owner's username is empty."""

    kind = GrantErrorKind.MISSING_USERNAME

    def __init__(self, message: str = "No username was provided") -> None:
        super().__init__(message)


class MissingPasswordError(CoreasonGrantError):
    """Raised when the resource owner's password is empty."""

    kind = GrantErrorKind.MISSING_PASSWORD

    def __init__(self, message: str = "No password was provided") -> None:
        super().__init__(message)


class MissingClientIdError(CoreasonGrantError):
    """Raised when the client configuration has no client_id."""

    kind = GrantErrorKind.MISSING_CLIENT_ID

    def __init__(self, message: str = "No client_id was configured") -> None:
        super().__init__(message)


class EncodingError(CoreasonGrantError):
    """Raised when a request value cannot be encoded as UTF-8. This is a configuration defect."""

    kind = GrantErrorKind.ENCODING_ERROR


class NoDataInResponseError(CoreasonGrantError):
    """Raised when the transport completed without a body and without an error."""

    kind = GrantErrorKind.NO_DATA_IN_RESPONSE

    def __init__(self, message: str = "No data in response") -> None:
        super().__init__(message)


class ResponseParseError(CoreasonGrantError):
    """
    Raised when the token endpoint response is not a JSON object.
    The underlying decoder error is available as `__cause__`.
    """

    kind = GrantErrorKind.RESPONSE_PARSE_ERROR


class ResponseError(CoreasonGrantError):
    """
    Raised when the token endpoint answers with an HTTP status >= 400.

    The message stays coarse ("The username or password is incorrect") for every
    rejection. The OAuth2 `error` and `error_description` fields of the parsed body
    are exposed separately so callers can branch without string matching.

    Attributes:
        status_code (int): The HTTP status returned by the token endpoint.
        payload (dict[str, Any]): The parsed error body.
        error_code (str | None): The OAuth2 `error` value, e.g. "invalid_grant".
        error_description (str | None): The OAuth2 `error_description` value.
    """

    kind = GrantErrorKind.RESPONSE_ERROR

    def __init__(
        self,
        message: str = "The username or password is incorrect",
        status_code: int = 400,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload: dict[str, Any] = payload or {}
        error_code = self.payload.get("error")
        error_description = self.payload.get("error_description")
        self.error_code = error_code if isinstance(error_code, str) else None
        self.error_description = error_description if isinstance(error_description, str) else None


class OversizedResponseError(CoreasonGrantError):
    """Raised when an HTTP response is too large."""


class CompletionError(CoreasonGrantError):
    """Raised when a one-shot completion is delivered more than once."""


def classify_error(error: BaseException) -> GrantErrorKind:
    """
    Returns the error kind for any exception.
    Exceptions that do not belong to this package are transport errors.
    """
    if isinstance(error, CoreasonGrantError):
        return error.kind
    return GrantErrorKind.TRANSPORT_ERROR
