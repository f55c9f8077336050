"""
View-model builders.

One pure builder per handled application state. Builders read the
application and the engine settings and return a fully populated,
frozen view-model. They never touch the store or the renderer.
"""

from typing import Any, Dict, Optional

from statusdoc.app.config import Settings
from statusdoc.app.schemas.application import Application
from statusdoc.app.schemas.view_models import (
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)
from statusdoc.app.services.portfolio import (
    compute_portfolio_total,
    get_portfolio_funds,
)


def format_full_name(first_name: str, surname: str) -> str:
    return f"{first_name} {surname}"


def _legal_entity(application: Application) -> Optional[str]:
    return application.legal_entity if application.is_legal_entity else None


def _common_fields(application: Application, settings: Settings) -> Dict[str, Any]:
    return {
        "reference_number": application.reference_number,
        "state": application.state.description,
        "full_name": format_full_name(
            application.person.first_name,
            application.person.surname,
        ),
        "legal_entity": _legal_entity(application),
        "applied_on": application.applied_on,
        "support_email": settings.support_email,
        "signature": settings.signature,
    }


def _portfolio_fields(application: Application, settings: Settings) -> Dict[str, Any]:
    return {
        "portfolio_funds": get_portfolio_funds(application),
        "portfolio_total_amount": compute_portfolio_total(
            application, settings.tax_rate
        ),
    }


def build_pending_view_model(
    application: Application,
    settings: Settings,
) -> PendingApplicationViewModel:
    return PendingApplicationViewModel(
        **_common_fields(application, settings),
    )


def build_activated_view_model(
    application: Application,
    settings: Settings,
) -> ActivatedApplicationViewModel:
    return ActivatedApplicationViewModel(
        **_common_fields(application, settings),
        **_portfolio_fields(application, settings),
    )


def build_in_review_view_model(
    application: Application,
    settings: Settings,
    in_review_message: str,
) -> InReviewApplicationViewModel:
    """
    Build the in-review view-model.

    ``in_review_message`` is resolved by the caller from the current
    review; the raw review is carried alongside it for the template.
    """
    return InReviewApplicationViewModel(
        **_common_fields(application, settings),
        **_portfolio_fields(application, settings),
        in_review_message=in_review_message,
        in_review_information=application.current_review,
    )
