"""
Application status document generator.

Given an application id and a base content location, the generator:

1. looks the application up in the store
2. selects the document variant for the application's state
3. builds the view-model and resolves the template path
4. renders markup from ``base location + template path``
5. converts the markup into the final document with the fixed layout

Missing applications and unsupported states are reported with a single
warning and produce no document (``None``). Failures raised by the
template resolver, the renderer or the converter are NOT caught here;
they propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from statusdoc.app.config import Settings
from statusdoc.app.exceptions import ConfigurationError
from statusdoc.app.registry.registry import get_document_variant
from statusdoc.app.schemas.pdf_options import build_pdf_options
from statusdoc.app.services.interfaces import (
    ApplicationStore,
    PdfGenerator,
    TemplatePathProvider,
    ViewGenerator,
)


PATH_SEPARATOR = "/"


def normalize_base_location(base_location: str) -> str:
    """Strip at most one trailing path separator."""
    if base_location.endswith(PATH_SEPARATOR):
        return base_location[: -len(PATH_SEPARATOR)]
    return base_location


def _require(value: object, name: str) -> None:
    if value is None:
        raise ConfigurationError(f"'{name}' is required.")


class ApplicationDocumentGenerator:
    """
    Generates status documents for applications.

    Stateless across calls: collaborators are injected once and every
    ``generate`` call works on request-local data only.
    """

    def __init__(
        self,
        *,
        store: ApplicationStore,
        template_paths: TemplatePathProvider,
        view_generator: ViewGenerator,
        settings: Settings,
        pdf_generator: PdfGenerator,
        logger: logging.Logger,
    ) -> None:
        _require(store, "store")
        _require(template_paths, "template_paths")
        _require(view_generator, "view_generator")
        _require(settings, "settings")
        _require(pdf_generator, "pdf_generator")
        _require(logger, "logger")

        self._store = store
        self._template_paths = template_paths
        self._view_generator = view_generator
        self._settings = settings
        self._pdf_generator = pdf_generator
        self._logger = logger

    def generate(self, application_id: UUID, base_location: str) -> Optional[bytes]:
        """
        Generate the status document for ``application_id``.

        Returns the PDF bytes, or ``None`` when the application does not
        exist or its state has no status document.
        """
        application = self._store.find_application(application_id)

        if application is None:
            self._logger.warning(
                "No application found for id '%s'", application_id
            )
            return None

        base_location = normalize_base_location(base_location)

        variant = get_document_variant(application.state)
        if variant is None:
            self._logger.warning(
                "The application is in state '%s' and no valid document "
                "can be generated for it.",
                application.state,
            )
            return None

        template_path = self._template_paths.get(variant.template_name)
        view_model = variant.build(application, self._settings)

        locator = f"{base_location}{template_path}"
        self._logger.debug(
            "Rendering '%s' for application '%s' from %s",
            variant.template_name,
            application_id,
            locator,
        )

        markup = self._view_generator.generate_from_path(locator, view_model)

        options = build_pdf_options(
            title=f"Application {application.reference_number}"
        )
        document = self._pdf_generator.generate_from_markup(markup, options)
        pdf_bytes = document.to_bytes()

        self._logger.info(
            "Generated '%s' document for application '%s'",
            variant.template_name,
            application_id,
        )
        return pdf_bytes
