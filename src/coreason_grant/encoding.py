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
application/x-www-form-urlencoded helpers.
"""

from collections.abc import Mapping
from urllib.parse import quote_plus


def form_encode(value: str) -> str:
    """
    Encodes a single value for an x-www-form-urlencoded body.

    Alphanumerics and `- _ . *` are kept, spaces become '+', everything else
    (including '~') is percent-encoded from its UTF-8 bytes.

    Raises:
        UnicodeEncodeError: If the value cannot be encoded as UTF-8 (e.g. lone surrogates).
    """
    # quote_plus always leaves '~' alone
    return quote_plus(value, safe="*", encoding="utf-8", errors="strict").replace("~", "%7E")


def query_string_for(params: Mapping[str, str]) -> str:
    """
    Joins `params` into `key=value&key=value`, encoding keys and values.
    Iteration order of the mapping is preserved.
    """
    return "&".join(f"{form_encode(key)}={form_encode(value)}" for key, value in params.items())
