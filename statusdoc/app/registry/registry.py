"""
Status document registry.

This module defines the set of status documents the engine can produce.
Each template entry explicitly binds together:

- a logical template name
- the view-model schema the template renders
- a template path, relative to the configured base location
- a human-readable description

``DOCUMENT_VARIANTS`` maps every handled application state to the
template name and the builder for that state. A state that is missing
from the table has no status document.
"""

from typing import Callable, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict

from statusdoc.app.config import Settings
from statusdoc.app.exceptions import ConfigurationError, TemplateNotFoundError
from statusdoc.app.schemas.application import Application, ApplicationState
from statusdoc.app.schemas.view_models import (
    ActivatedApplicationViewModel,
    ApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)
from statusdoc.app.services.review_message import resolve_review_message
from statusdoc.app.services.view_models import (
    build_activated_view_model,
    build_in_review_view_model,
    build_pending_view_model,
)


PENDING_APPLICATION = "PendingApplication"
ACTIVATED_APPLICATION = "ActivatedApplication"
IN_REVIEW_APPLICATION = "InReviewApplication"


class TemplateEntry(BaseModel):
    """
    Declarative description of a status document template.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    view_model: Type[BaseModel]
    template_path: str
    description: str


TEMPLATE_REGISTRY: Dict[str, TemplateEntry] = {
    PENDING_APPLICATION: TemplateEntry(
        name=PENDING_APPLICATION,
        view_model=PendingApplicationViewModel,
        template_path="/pending_application.tex.jinja",
        description=(
            "Acknowledgement for an application that has been received "
            "and is awaiting activation."
        ),
    ),
    ACTIVATED_APPLICATION: TemplateEntry(
        name=ACTIVATED_APPLICATION,
        view_model=ActivatedApplicationViewModel,
        template_path="/activated_application.tex.jinja",
        description=(
            "Confirmation of an activated application, including the "
            "portfolio fund table and the tax-adjusted portfolio total."
        ),
    ),
    IN_REVIEW_APPLICATION: TemplateEntry(
        name=IN_REVIEW_APPLICATION,
        view_model=InReviewApplicationViewModel,
        template_path="/in_review_application.tex.jinja",
        description=(
            "Notice for an application placed in review, with the review "
            "explanation and the current portfolio."
        ),
    ),
}


class RegistryTemplatePathProvider:
    """
    Template path provider backed by a template registry.
    """

    def __init__(self, registry: Optional[Dict[str, TemplateEntry]] = None) -> None:
        self._registry = TEMPLATE_REGISTRY if registry is None else registry

    def get(self, name: str) -> str:
        entry = self._registry.get(name)
        if entry is None:
            raise TemplateNotFoundError(f"Template '{name}' not found.")
        return entry.template_path


# ---------------------------------------------------------------------------
# Document variants (one per handled state)
# ---------------------------------------------------------------------------

ViewModelBuilder = Callable[[Application, Settings], ApplicationViewModel]


class DocumentVariant(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    template_name: str
    build_view_model: ViewModelBuilder

    def build(
        self,
        application: Application,
        settings: Settings,
        registry: Optional[Dict[str, TemplateEntry]] = None,
    ) -> ApplicationViewModel:
        """
        Build the view-model and check it against the registered template.

        The registry entry for ``template_name`` fixes the view-model type
        the template renders; a builder producing anything else is a
        wiring error.
        """
        registry = TEMPLATE_REGISTRY if registry is None else registry

        entry = registry.get(self.template_name)
        if entry is None:
            raise TemplateNotFoundError(f"Template '{self.template_name}' not found.")

        view_model = self.build_view_model(application, settings)
        if not isinstance(view_model, entry.view_model):
            raise ConfigurationError(
                f"Template '{self.template_name}' renders "
                f"{entry.view_model.__name__}, but its builder produced "
                f"{type(view_model).__name__}."
            )
        return view_model


def _build_in_review(
    application: Application,
    settings: Settings,
) -> InReviewApplicationViewModel:
    review = application.current_review
    message = resolve_review_message(review.reason if review else None)
    return build_in_review_view_model(application, settings, message)


DOCUMENT_VARIANTS: Dict[ApplicationState, DocumentVariant] = {
    ApplicationState.PENDING: DocumentVariant(
        template_name=PENDING_APPLICATION,
        build_view_model=build_pending_view_model,
    ),
    ApplicationState.ACTIVATED: DocumentVariant(
        template_name=ACTIVATED_APPLICATION,
        build_view_model=build_activated_view_model,
    ),
    ApplicationState.IN_REVIEW: DocumentVariant(
        template_name=IN_REVIEW_APPLICATION,
        build_view_model=_build_in_review,
    ),
}


def get_document_variant(state: ApplicationState) -> Optional[DocumentVariant]:
    """Return the variant for ``state``, or ``None`` if it is unsupported."""
    return DOCUMENT_VARIANTS.get(state)
