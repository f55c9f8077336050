"""
Application domain schemas.

Defines the read-only records the document engine consumes:
an Application, its Person, its Products and their Funds, and the
Review metadata attached to applications that are in review.

These records are owned by the application store. The document
engine never mutates them; all models are frozen.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ApplicationState(str, Enum):
    """
    Lifecycle state of an application.

    Only PENDING, ACTIVATED and IN_REVIEW have a status document.
    The remaining states exist in the store but are not rendered.
    """

    PENDING = "pending"
    ACTIVATED = "activated"
    IN_REVIEW = "in_review"
    REJECTED = "rejected"
    CLOSED = "closed"

    @property
    def description(self) -> str:
        """Human-readable state text shown on the document."""
        return _STATE_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.REJECTED: "Rejected",
    ApplicationState.CLOSED: "Closed",
}


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    surname: str


class Fund(BaseModel):
    """
    A single fund holding.

    ``amount`` is the gross value; ``fees`` is the cost deducted
    before tax is applied.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    amount: Decimal = Field(..., ge=0)
    fees: Decimal = Field(Decimal("0"), ge=0)


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    funds: List[Fund] = Field(default_factory=list)


class Review(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: str = ""


class Application(BaseModel):
    """
    A financial-product application.

    ``legal_entity`` is only meaningful when ``is_legal_entity`` is set.
    ``current_review`` is only meaningful while the application is
    IN_REVIEW.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    state: ApplicationState
    reference_number: str
    applied_on: date
    person: Person
    products: List[Product] = Field(default_factory=list)
    current_review: Optional[Review] = None
    is_legal_entity: bool = False
    legal_entity: Optional[str] = None
