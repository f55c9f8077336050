"""
Status document view-models.

Each handled application state has exactly one view-model shape.
View-models are flat, render-ready records consumed by the markup
templates. They are built in one step by the builders in
``statusdoc.app.services.view_models`` and are frozen afterwards.

The ``kind`` field is the discriminator of the ``ApplicationViewModel``
union.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from statusdoc.app.schemas.application import Fund, Review


class PendingApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["pending"] = "pending"

    reference_number: str
    state: str
    full_name: str
    legal_entity: Optional[str] = None
    applied_on: date
    support_email: str
    signature: str


class ActivatedApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["activated"] = "activated"

    reference_number: str
    state: str
    full_name: str
    legal_entity: Optional[str] = None
    applied_on: date
    support_email: str
    signature: str

    portfolio_funds: List[Fund] = Field(default_factory=list)
    portfolio_total_amount: Decimal


class InReviewApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["in_review"] = "in_review"

    reference_number: str
    state: str
    full_name: str
    legal_entity: Optional[str] = None
    applied_on: date
    support_email: str
    signature: str

    portfolio_funds: List[Fund] = Field(default_factory=list)
    portfolio_total_amount: Decimal

    in_review_message: str
    in_review_information: Optional[Review] = None


ApplicationViewModel = Annotated[
    Union[
        PendingApplicationViewModel,
        ActivatedApplicationViewModel,
        InReviewApplicationViewModel,
    ],
    Field(discriminator="kind"),
]
