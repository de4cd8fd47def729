from __future__ import annotations

import math
from typing import Optional


class InvalidInputError(ValueError):
    """Raised when calculator input is out of range, before any arithmetic."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def require_finite(field: str, value: float) -> None:
    # NaN slips past ordinary comparisons, so check it explicitly
    if value is None or not math.isfinite(value):
        raise InvalidInputError(f"{field} must be a finite number, got {value}", field=field)


def require_non_negative(field: str, value: float) -> None:
    require_finite(field, value)
    if value < 0:
        raise InvalidInputError(f"{field} cannot be negative, got {value}", field=field)


def require_percentage(field: str, value: float) -> None:
    require_finite(field, value)
    if not (0 <= value <= 100):
        raise InvalidInputError(f"{field} must be 0-100, got {value}", field=field)
