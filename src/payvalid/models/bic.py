"""Structural components of an ISO 9362 Business Identifier Code.

An 11-character BIC reads::

    DEUT DE FF 500
    |    |  |  +-- branch code ("XXX" for the primary office)
    |    |  +----- location code
    |    +-------- ISO 3166-1 country code
    +------------- institution (bank) code

The second location character carries a convention: ``0`` is typically a
test BIC, ``1`` a passive participant in the SWIFT network, and ``2`` a
reverse billing BIC where the recipient pays for the message.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

PRIMARY_OFFICE_BRANCH = "XXX"


class BicComponents(BaseModel):
    """A structurally valid BIC split into its parts (always upper case)."""

    institution_code: str = Field(min_length=4, max_length=4)
    country_code: str = Field(min_length=2, max_length=2)
    location_code: str = Field(min_length=2, max_length=2)
    branch_code: str = Field(default=PRIMARY_OFFICE_BRANCH, min_length=3, max_length=3)

    model_config = {"frozen": True}

    @property
    def bic8(self) -> str:
        return f"{self.institution_code}{self.country_code}{self.location_code}"

    @property
    def bic11(self) -> str:
        return f"{self.bic8}{self.branch_code}"

    @property
    def is_primary_office(self) -> bool:
        return self.branch_code == PRIMARY_OFFICE_BRANCH

    @property
    def is_test_bic(self) -> bool:
        return self.location_code[1] == "0"

    @property
    def is_passive_participant(self) -> bool:
        return self.location_code[1] == "1"

    @property
    def is_reverse_billing(self) -> bool:
        return self.location_code[1] == "2"
