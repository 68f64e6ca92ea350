from __future__ import annotations

from typing import Any


class FailurePropagated(Exception):
    """Raised by ``Result.value_or_throw`` when the stored error is not an exception.

    Exception errors are raised as-is; anything else is carried here on
    ``error`` so callers can still recover the original failure value.
    """

    error: Any

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"result failure: {self.error!r}"
