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
OAuth2 resource owner password credentials grant: token request construction, exchange and outcome classification.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .client import PasswordGrantClient, PasswordGrantClientAsync
from .config import CoreasonGrantConfig
from .controller import GrantController
from .exceptions import (
    CoreasonGrantError,
    EncodingError,
    GrantErrorKind,
    MissingClientIdError,
    MissingPasswordError,
    MissingUsernameError,
    NoDataInResponseError,
    ResponseError,
    ResponseParseError,
)
from .exchanger import TokenExchanger
from .grants import GrantStrategy, PasswordGrant
from .models import (
    AuthConfig,
    ClientIdentity,
    Credentials,
    EndpointConfig,
    GrantState,
    TokenFailure,
    TokenRequest,
    TokenResponse,
    TokenResult,
    TokenSuccess,
)
from .request_builder import build_token_request
from .transport import HTTPXTokenTransport, TokenTransport

__all__ = [
    "AuthConfig",
    "ClientIdentity",
    "CoreasonGrantConfig",
    "CoreasonGrantError",
    "Credentials",
    "EncodingError",
    "EndpointConfig",
    "GrantController",
    "GrantErrorKind",
    "GrantState",
    "GrantStrategy",
    "HTTPXTokenTransport",
    "MissingClientIdError",
    "MissingPasswordError",
    "MissingUsernameError",
    "NoDataInResponseError",
    "PasswordGrant",
    "PasswordGrantClient",
    "PasswordGrantClientAsync",
    "ResponseError",
    "ResponseParseError",
    "TokenExchanger",
    "TokenFailure",
    "TokenRequest",
    "TokenResponse",
    "TokenResult",
    "TokenSuccess",
    "TokenTransport",
    "build_token_request",
]
