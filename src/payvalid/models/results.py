"""Validation result models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, model_validator

from payvalid.models.annotations import PaymentValidationAnnotation


class BicValidationResult(BaseModel):
    """Outcome of validating a single BIC candidate.

    ``annotation`` is present if and only if ``valid`` is False.
    """

    bic: Optional[str] = None
    valid: bool
    annotation: Optional[PaymentValidationAnnotation] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _annotation_matches_validity(self) -> BicValidationResult:
        if self.valid and self.annotation is not None:
            raise ValueError("a valid result must not carry an annotation")
        if not self.valid and self.annotation is None:
            raise ValueError("an invalid result requires an annotation")
        return self
