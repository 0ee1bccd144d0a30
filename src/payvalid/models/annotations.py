"""Validation annotation models attached to failed checks."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class AnnotationLevel(StrEnum):
    REJECT = "REJECT"
    WARN = "WARN"
    INFO = "INFO"


class PaymentValidationAnnotation(BaseModel):
    """Structured record explaining why a check did not pass."""

    check_name: str
    level: AnnotationLevel
    message: str

    model_config = {"frozen": True}
