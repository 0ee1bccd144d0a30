"""Payment identifier validators."""

from __future__ import annotations

from payvalid.validation.bic import (
    BicValidator,
    is_valid_format,
    parse_bic,
    validate,
)

__all__ = ["BicValidator", "is_valid_format", "parse_bic", "validate"]
