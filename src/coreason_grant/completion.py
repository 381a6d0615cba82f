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
One-shot completion callbacks.
"""

from collections.abc import Callable
from typing import Any, Generic, ParamSpec

from coreason_grant.exceptions import CompletionError

P = ParamSpec("P")


class OneShot(Generic[P]):
    """
    Wraps a callback so that it can be delivered exactly once.
    A second delivery raises CompletionError instead of reaching the callback.
    """

    def __init__(self, callback: Callable[P, Any]) -> None:
        self._callback = callback
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        if self._fired:
            raise CompletionError("Completion has already been delivered")
        self._fired = True
        self._callback(*args, **kwargs)
