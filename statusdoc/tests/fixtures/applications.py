"""
Application factories shared by the test-suite.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID, uuid4

from statusdoc.app.config import DEFAULT_TEMPLATE_DIR, Settings
from statusdoc.app.schemas.application import (
    Application,
    ApplicationState,
    Fund,
    Person,
    Product,
    Review,
)


def make_settings(**overrides) -> Settings:
    """
    Settings pinned for tests.

    Every field is passed explicitly and the .env file is skipped, so
    STATUSDOC_* variables in the developer environment have no effect.
    """
    values = {
        "support_email": "help@example.com",
        "signature": "Client Services",
        "tax_rate": Decimal("0.1"),
        "template_dir": DEFAULT_TEMPLATE_DIR,
        "lualatex_command": "lualatex",
        "latex_timeout_seconds": 60,
        "applications_file": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_products() -> List[Product]:
    return [
        Product(
            name="Growth",
            funds=[Fund(name="Equity Fund", amount=Decimal("100"), fees=Decimal("10"))],
        ),
        Product(
            name="Income",
            funds=[Fund(name="Bond Fund", amount=Decimal("50"), fees=Decimal("5"))],
        ),
    ]


def make_application(
    *,
    state: ApplicationState = ApplicationState.PENDING,
    application_id: Optional[UUID] = None,
    first_name: str = "Thandi",
    surname: str = "Nkosi",
    products: Optional[List[Product]] = None,
    review_reason: Optional[str] = None,
    is_legal_entity: bool = False,
    legal_entity: Optional[str] = None,
) -> Application:
    return Application(
        id=application_id or uuid4(),
        state=state,
        reference_number="APP-0001",
        applied_on=date(2024, 3, 15),
        person=Person(first_name=first_name, surname=surname),
        products=make_products() if products is None else products,
        current_review=(
            Review(reason=review_reason) if review_reason is not None else None
        ),
        is_legal_entity=is_legal_entity,
        legal_entity=legal_entity,
    )
