"""Offer Schemas: Pydantic models for offer submissions, stored offers, and API payloads.

Invariants:
    - OfferSubmission.email is non-empty; OfferSubmission.amount is a truthy, finite number
    - Offer is frozen: never mutated after the ledger stamps it
    - description is optional and omitted from JSON when absent (never "")
    - Wire names are camelCase (totalOffers); Python names are snake_case

Design Decisions:
    - Presence checks live in the router (exact 400 messages); these models only
      reject values that cannot form an Offer at all
    - to_wire() centralizes by_alias + exclude_none so every payload serializes the same way
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OfferSubmission(_WireModel):
    """Client-supplied offer fields, before the server assigns a timestamp."""
    email: str = Field(min_length=1)
    amount: int | float
    description: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def reject_non_numeric_amount(cls, v: object) -> object:
        # bool is an int subclass; "500" would be coerced in lax mode
        if isinstance(v, (bool, str)):
            raise ValueError("amount must be a number")
        # NaN and 1e999 decode to floats that JSON cannot carry back out
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("amount must be finite")
        return v


class Offer(OfferSubmission):
    """An appended offer as stored in the OfferLog."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: str


class OfferReceipt(_WireModel):
    """Result of appending an offer."""
    domain: str
    offer: Offer
    total_offers: int = Field(alias="totalOffers")


class OfferListing(_WireModel):
    """All offers recorded for a domain, in submission order."""
    domain: str
    offers: list[Offer]


class RequestTally(_WireModel):
    """Request counter for a domain; timestamp only set when the counter moved."""
    domain: str
    count: int = Field(ge=0)
    timestamp: str | None = None
