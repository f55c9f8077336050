"""
Collaborator interfaces consumed by the document generator.

The generator depends only on these protocols. Shipped implementations
live in ``store``, ``registry``, ``templating`` and ``latex``; tests
supply their own fakes.
"""

from __future__ import annotations

from typing import Optional, Protocol
from uuid import UUID

from pydantic import BaseModel

from statusdoc.app.schemas.application import Application
from statusdoc.app.schemas.pdf_options import PdfOptions


class ApplicationStore(Protocol):
    """
    Read-only access to stored applications.

    Returns at most one match, or ``None``.
    """

    def find_application(self, application_id: UUID) -> Optional[Application]:
        ...


class TemplatePathProvider(Protocol):
    """Maps a logical template name to a path under the base location."""

    def get(self, name: str) -> str:
        ...


class ViewGenerator(Protocol):
    """Renders a view-model into markup using the template at ``locator``."""

    def generate_from_path(self, locator: str, view_model: BaseModel) -> str:
        ...


class Document(Protocol):
    def to_bytes(self) -> bytes:
        ...


class PdfGenerator(Protocol):
    """Converts markup plus layout options into a final document."""

    def generate_from_markup(self, markup: str, options: PdfOptions) -> Document:
        ...
