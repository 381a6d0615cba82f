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
RequestBuilder component for the resource owner password credentials token request.
"""

import base64
from collections.abc import Mapping

from coreason_grant.encoding import form_encode, query_string_for
from coreason_grant.exceptions import (
    EncodingError,
    MissingClientIdError,
    MissingPasswordError,
    MissingUsernameError,
)
from coreason_grant.models import AuthConfig, ClientIdentity, Credentials, EndpointConfig, TokenRequest
from coreason_grant.utils.logger import logger

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"
JSON_ACCEPT = "application/json"


def basic_authorization(client_id: str, client_secret: str) -> str:
    """
    Returns the `Authorization` header value for HTTP Basic client authentication.

    Both parts are form-encoded before being joined by ':' (RFC 6749, section 2.3.1).

    Raises:
        EncodingError: If the credentials cannot be encoded as UTF-8.
    """
    try:
        pair = f"{form_encode(client_id)}:{form_encode(client_secret)}".encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Failed to encode client credentials as UTF-8: {e.reason}") from e
    return f"Basic {base64.b64encode(pair).decode('ascii')}"


def build_token_request(
    credentials: Credentials,
    client_identity: ClientIdentity,
    auth_config: AuthConfig,
    endpoint_config: EndpointConfig,
    extra_params: Mapping[str, str] | None = None,
) -> TokenRequest:
    """
    Builds the POST request for the "password" grant.

    Validation happens before any encoding work, in the order username,
    password, client_id. Client authentication is either body parameters
    (`auth_config.secret_in_body`) or a Basic header, never both, and is
    omitted for public clients.

    Args:
        credentials: The resource owner's username and password.
        client_identity: The client's id and optional secret.
        auth_config: Selects body or header client authentication.
        endpoint_config: Token endpoint (falls back to the authorize URL) and scope.
        extra_params: Additional body parameters, appended after the scope.

    Returns:
        TokenRequest: The immutable request.

    Raises:
        MissingUsernameError: If the username is empty.
        MissingPasswordError: If the password is empty.
        MissingClientIdError: If the client_id is empty or absent.
        EncodingError: If a value cannot be encoded as UTF-8.
    """
    if not credentials.username:
        raise MissingUsernameError()
    password = credentials.password.get_secret_value()
    if not password:
        raise MissingPasswordError()
    client_id = client_identity.client_id
    if not client_id:
        raise MissingClientIdError()

    headers = [
        ("Content-Type", FORM_CONTENT_TYPE),
        ("Accept", JSON_ACCEPT),
    ]
    secret = client_identity.client_secret.get_secret_value() if client_identity.client_secret else None

    try:
        body = f"grant_type=password&username={form_encode(credentials.username)}&password={form_encode(password)}"
        if endpoint_config.scope:
            body += f"&scope={form_encode(endpoint_config.scope)}"
        if extra_params:
            body += "&" + query_string_for(extra_params)

        if secret and auth_config.secret_in_body:
            logger.debug("Adding 'client_id' and 'client_secret' to request body")
            body += f"&client_id={form_encode(client_id)}&client_secret={form_encode(secret)}"
        elif secret:
            logger.debug("Adding 'Authorization' header as 'Basic client-key:client-secret'")
            headers.append(("Authorization", basic_authorization(client_id, secret)))
    except UnicodeEncodeError as e:
        raise EncodingError(f"Failed to encode token request as UTF-8: {e.reason}") from e

    return TokenRequest(url=endpoint_config.token_endpoint, headers=tuple(headers), body=body)
