# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_grant

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from coreason_grant.config import CoreasonGrantConfig


def test_config_loading() -> None:
    """Test loading configuration from environment variables."""
    with patch.dict(
        os.environ,
        {
            "COREASON_GRANT_AUTHORIZE_URL": "https://auth.example.com/authorize",
            "COREASON_GRANT_TOKEN_URL": "https://auth.example.com/token",
            "COREASON_GRANT_CLIENT_ID": "cid",
            "COREASON_GRANT_CLIENT_SECRET": "s3cret",
            "COREASON_GRANT_SECRET_IN_BODY": "true",
            "COREASON_GRANT_SCOPE": "openid profile",
        },
    ):
        config = CoreasonGrantConfig()

    assert config.authorize_url == "https://auth.example.com/authorize"
    assert config.token_url == "https://auth.example.com/token"
    assert config.client_id == "cid"
    assert config.client_secret is not None
    assert config.client_secret.get_secret_value() == "s3cret"
    assert config.secret_in_body is True
    assert config.scope == "openid profile"


def test_config_case_insensitive() -> None:
    with patch.dict(os.environ, {"coreason_grant_authorize_url": "https://lower.example.com/authorize"}):
        config = CoreasonGrantConfig()

    assert config.authorize_url == "https://lower.example.com/authorize"


def test_config_defaults() -> None:
    config = CoreasonGrantConfig(authorize_url="https://auth.example.com/authorize")

    assert config.token_url is None
    assert config.client_id is None
    assert config.client_secret is None
    assert config.secret_in_body is False
    assert config.http_timeout == 30.0
    assert config.max_response_bytes == 1_000_000


def test_authorize_url_required() -> None:
    with pytest.raises(ValidationError):
        CoreasonGrantConfig()


def test_http_rejected_without_local_dev() -> None:
    with pytest.raises(ValidationError, match="HTTPS is required"):
        CoreasonGrantConfig(authorize_url="http://auth.example.com/authorize")

    with pytest.raises(ValidationError, match="HTTPS is required"):
        CoreasonGrantConfig(authorize_url="https://auth.example.com/authorize", token_url="http://localhost/token")


def test_http_allowed_for_local_dev() -> None:
    config = CoreasonGrantConfig(
        authorize_url="http://localhost:8080/authorize", token_url="http://localhost:8080/token", unsafe_local_dev=True
    )

    assert config.token_url == "http://localhost:8080/token"


@pytest.mark.parametrize("url", ["auth.example.com/token", "ftp://auth.example.com/token", "https://"])
def test_invalid_urls_rejected(url: str) -> None:
    with pytest.raises(ValidationError, match="Invalid endpoint URL"):
        CoreasonGrantConfig(authorize_url=url)


@pytest.mark.parametrize("field", ["http_timeout", "max_response_bytes"])
def test_non_positive_limits_rejected(field: str) -> None:
    with pytest.raises(ValidationError):
        CoreasonGrantConfig(authorize_url="https://auth.example.com/authorize", **{field: 0})


def test_value_objects() -> None:
    config = CoreasonGrantConfig(
        authorize_url="https://auth.example.com/authorize",
        client_id="cid",
        client_secret="s3cret",
        secret_in_body=True,
        scope="openid",
    )

    identity = config.client_identity()
    assert identity.client_id == "cid"
    assert identity.client_secret is not None
    assert identity.client_secret.get_secret_value() == "s3cret"
    assert config.auth_config().secret_in_body is True

    endpoints = config.endpoint_config()
    assert endpoints.token_endpoint == "https://auth.example.com/authorize"
    assert endpoints.scope == "openid"


def test_secret_not_in_repr() -> None:
    config = CoreasonGrantConfig(authorize_url="https://auth.example.com/authorize", client_secret="s3cret")

    assert "s3cret" not in repr(config)
