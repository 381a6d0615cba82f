# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_grant

import httpx

from coreason_grant.exceptions import (
    CompletionError,
    CoreasonGrantError,
    EncodingError,
    GrantErrorKind,
    MissingClientIdError,
    MissingPasswordError,
    MissingUsernameError,
    NoDataInResponseError,
    OversizedResponseError,
    ResponseError,
    ResponseParseError,
    classify_error,
)


def test_exception_hierarchy() -> None:
    """Test that all custom exceptions inherit from CoreasonGrantError."""
    for exc in (
        MissingUsernameError,
        MissingPasswordError,
        MissingClientIdError,
        EncodingError,
        NoDataInResponseError,
        ResponseParseError,
        ResponseError,
        OversizedResponseError,
        CompletionError,
    ):
        assert issubclass(exc, CoreasonGrantError)


def test_kinds() -> None:
    assert classify_error(MissingUsernameError()) == GrantErrorKind.MISSING_USERNAME
    assert classify_error(MissingPasswordError()) == GrantErrorKind.MISSING_PASSWORD
    assert classify_error(MissingClientIdError()) == GrantErrorKind.MISSING_CLIENT_ID
    assert classify_error(EncodingError("bad")) == GrantErrorKind.ENCODING_ERROR
    assert classify_error(NoDataInResponseError()) == GrantErrorKind.NO_DATA_IN_RESPONSE
    assert classify_error(ResponseParseError("bad")) == GrantErrorKind.RESPONSE_PARSE_ERROR
    assert classify_error(ResponseError()) == GrantErrorKind.RESPONSE_ERROR


def test_foreign_errors_are_transport_errors() -> None:
    assert classify_error(httpx.ConnectTimeout("t")) == GrantErrorKind.TRANSPORT_ERROR
    assert classify_error(OversizedResponseError("big")) == GrantErrorKind.TRANSPORT_ERROR


def test_response_error_defaults() -> None:
    err = ResponseError()

    assert str(err) == "The username or password is incorrect"
    assert err.payload == {}
    assert err.error_code is None
    assert err.error_description is None


def test_response_error_ignores_non_string_fields() -> None:
    err = ResponseError(status_code=400, payload={"error": 12, "error_description": ["x"]})

    assert err.error_code is None
    assert err.error_description is None
    assert err.payload == {"error": 12, "error_description": ["x"]}


def test_default_messages() -> None:
    assert str(MissingUsernameError()) == "No username was provided"
    assert str(NoDataInResponseError()) == "No data in response"
