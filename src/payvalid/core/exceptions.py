"""PayValid exception hierarchy."""

from __future__ import annotations


class PayValidError(Exception):
    """Base exception for all PayValid errors."""


class InvalidBicError(PayValidError, ValueError):
    """Value does not follow the ISO 9362 BIC structure."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Not a structurally valid BIC: {value!r}")
