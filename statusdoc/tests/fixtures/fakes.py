"""
Recording fakes for the document generator's collaborators.

Deterministic, CI-safe, and never touch the filesystem or LuaLaTeX.
Each fake records its calls so tests can assert on what the generator
handed over.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel

from statusdoc.app.registry.registry import RegistryTemplatePathProvider
from statusdoc.app.schemas.pdf_options import PdfOptions


class RecordingTemplatePaths(RegistryTemplatePathProvider):
    def __init__(self) -> None:
        super().__init__()
        self.requested: List[str] = []

    def get(self, name: str) -> str:
        self.requested.append(name)
        return super().get(name)


class FakeViewGenerator:
    def __init__(self, markup: str = r"\section*{Fake}") -> None:
        self._markup = markup
        self.calls: List[Tuple[str, BaseModel]] = []

    def generate_from_path(self, locator: str, view_model: BaseModel) -> str:
        self.calls.append((locator, view_model))
        return self._markup


class FailingViewGenerator:
    def __init__(self, error: Exception) -> None:
        self._error = error

    def generate_from_path(self, locator: str, view_model: BaseModel) -> str:
        raise self._error


class FakeDocument:
    def __init__(self, payload: bytes) -> None:
        self._payload = payload

    def to_bytes(self) -> bytes:
        return self._payload


class FakePdfGenerator:
    def __init__(self, payload: bytes = b"%PDF-fake") -> None:
        self._payload = payload
        self.calls: List[Tuple[str, PdfOptions]] = []

    def generate_from_markup(self, markup: str, options: PdfOptions) -> FakeDocument:
        self.calls.append((markup, options))
        return FakeDocument(self._payload)

    @property
    def last_options(self) -> Optional[PdfOptions]:
        return self.calls[-1][1] if self.calls else None

