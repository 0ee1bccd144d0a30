"""BicValidator — ISO 9362 structural check for Business Identifier Codes.

A BIC (also SWIFT-BIC) is 8 or 11 characters long:

    4 letters               institution / bank code (DEUT is Deutsche Bank)
    2 letters               ISO 3166-1 country code
    2 letters or digits     location code
    3 letters or digits     optional branch code, "XXX" for the primary office

An 8-character code may be assumed to refer to the primary office. Only the
structure is checked here; whether the institution actually exists is not.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from payvalid.core.config import AppSettings
from payvalid.core.exceptions import InvalidBicError
from payvalid.core.log import mask_identifier
from payvalid.models.annotations import AnnotationLevel, PaymentValidationAnnotation
from payvalid.models.bic import PRIMARY_OFFICE_BRANCH, BicComponents
from payvalid.models.results import BicValidationResult

logger = logging.getLogger(__name__)

ISO_9362_CHECK = "ISO_9362 check"
INVALID_BIC_MESSAGE = "BIC is not valid."

BIC_LENGTHS = (8, 11)
_BIC_RE = re.compile(r"[A-Z]{6}[A-Z0-9]{2}(?:[A-Z0-9]{3})?")


def is_valid_format(candidate: Any) -> bool:
    """Return True iff ``candidate`` follows the ISO 9362 BIC structure.

    Case-insensitive. None, non-strings and the empty string are invalid.
    """
    if not isinstance(candidate, str):
        return False
    if len(candidate) not in BIC_LENGTHS:
        return False
    # upper() is length-preserving only for ASCII
    if not candidate.isascii():
        return False
    return _BIC_RE.fullmatch(candidate.upper()) is not None


def parse_bic(candidate: Any) -> BicComponents:
    """Split a BIC into institution, country, location and branch codes.

    Raises:
        InvalidBicError: if ``candidate`` is not a structurally valid BIC.
    """
    if not is_valid_format(candidate):
        raise InvalidBicError(candidate)
    bic = candidate.upper()
    return BicComponents(
        institution_code=bic[0:4],
        country_code=bic[4:6],
        location_code=bic[6:8],
        branch_code=bic[8:11] or PRIMARY_OFFICE_BRANCH,
    )


class BicValidator:
    """Wraps the structural check in a BicValidationResult.

    Holds no per-call state, so one instance can be shared freely.
    """

    def __init__(self, *, settings: AppSettings | None = None) -> None:
        if settings is None:
            settings = AppSettings()
        self._settings = settings

    @staticmethod
    def is_valid(candidate: Any) -> bool:
        return is_valid_format(candidate)

    def validate(self, candidate: Any) -> BicValidationResult:
        """Validate one candidate. Never raises for malformed input."""
        bic = candidate if isinstance(candidate, str) else None
        if is_valid_format(candidate):
            return BicValidationResult(bic=bic, valid=True)

        if self._settings.validation.log_rejections:
            logger.debug("Rejected BIC %s", mask_identifier(candidate))
        return BicValidationResult(
            bic=bic,
            valid=False,
            annotation=PaymentValidationAnnotation(
                check_name=ISO_9362_CHECK,
                level=AnnotationLevel.REJECT,
                message=INVALID_BIC_MESSAGE,
            ),
        )

    def validate_many(self, candidates: Iterable[Any]) -> list[BicValidationResult]:
        """Validate each candidate in order, one result per input."""
        return [self.validate(candidate) for candidate in candidates]


_default_validator: BicValidator | None = None


def validate(candidate: Any) -> BicValidationResult:
    """Validate ``candidate`` with a shared default BicValidator."""
    global _default_validator
    if _default_validator is None:
        _default_validator = BicValidator()
    return _default_validator.validate(candidate)
