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
Parsing of token endpoint responses.
"""

import json
from typing import Any, Protocol

from coreason_grant.exceptions import ResponseParseError


class ResponseParser(Protocol):
    """Protocol for turning a token endpoint body into a JSON object."""

    def parse(self, data: bytes) -> dict[str, Any]:
        """
        Raises:
            ResponseParseError: If the body is not a JSON object.
        """
        ...


class JSONResponseParser:
    """Parses UTF-8 JSON bodies. The top level must be an object; an empty object is valid."""

    def parse(self, data: bytes) -> dict[str, Any]:
        try:
            parsed = json.loads(data.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise ResponseParseError(f"Response is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Response is not valid JSON: {e}") from e

        if not isinstance(parsed, dict):
            raise ResponseParseError(f"Expected a JSON object, got {type(parsed).__name__}")
        return parsed
