"""
FastAPI dependency providers.

Routes obtain the application store and the document generator through
these providers so tests can swap them with ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import Depends

from statusdoc.app.config import Settings, get_settings
from statusdoc.app.registry.registry import RegistryTemplatePathProvider
from statusdoc.app.services.generator import ApplicationDocumentGenerator
from statusdoc.app.services.latex import LuaLatexPdfGenerator
from statusdoc.app.services.store import InMemoryApplicationStore
from statusdoc.app.services.templating import JinjaViewGenerator


@lru_cache(maxsize=None)
def _load_application_store(
    applications_file: Optional[Path],
) -> InMemoryApplicationStore:
    if applications_file is not None:
        return InMemoryApplicationStore.from_json_file(applications_file)
    return InMemoryApplicationStore()


def get_application_store(
    settings: Settings = Depends(get_settings),
) -> InMemoryApplicationStore:
    """
    Process-wide application store.

    Seeded from ``applications_file`` when configured, otherwise empty.
    One store is kept per seed file.
    """
    return _load_application_store(settings.applications_file)


def get_document_generator(
    settings: Settings = Depends(get_settings),
    store: InMemoryApplicationStore = Depends(get_application_store),
) -> ApplicationDocumentGenerator:
    return ApplicationDocumentGenerator(
        store=store,
        template_paths=RegistryTemplatePathProvider(),
        view_generator=JinjaViewGenerator(),
        settings=settings,
        pdf_generator=LuaLatexPdfGenerator(
            timeout_seconds=settings.latex_timeout_seconds,
            lualatex_command=settings.lualatex_command,
        ),
        logger=logging.getLogger("statusdoc.generator"),
    )
