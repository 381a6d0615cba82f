# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_grant

from unittest.mock import MagicMock

import pytest

from coreason_grant.completion import OneShot
from coreason_grant.exceptions import CompletionError


def test_delivers_once() -> None:
    callback = MagicMock()
    once = OneShot(callback)

    assert once.fired is False
    once({"access_token": "x"}, None)

    assert once.fired is True
    callback.assert_called_once_with({"access_token": "x"}, None)


def test_second_delivery_rejected() -> None:
    callback = MagicMock()
    once = OneShot(callback)
    once(None, ValueError("first"))

    with pytest.raises(CompletionError):
        once(None, ValueError("second"))

    callback.assert_called_once()


def test_callback_error_still_counts_as_delivered() -> None:
    once = OneShot(MagicMock(side_effect=RuntimeError("callback failed")))

    with pytest.raises(RuntimeError):
        once(None, None)

    assert once.fired is True
    with pytest.raises(CompletionError):
        once(None, None)
