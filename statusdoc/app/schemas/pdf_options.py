"""
Layout options handed to the document converter.

The status documents use a fixed layout: numeric page numbers and a
letterhead shown on the first page only. ``build_pdf_options`` returns
that layout.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# LaTeX letterhead fragment placed in the page header.
PDF_HEADER = (
    r"\textbf{\large Application Status}"
    r"\hfill"
    r"{\small Confidential}"
)


class PageNumbers(str, Enum):
    NUMERIC = "numeric"


class HeaderRepeat(str, Enum):
    FIRST_PAGE_ONLY = "first_page_only"


class HeaderOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    repeat: HeaderRepeat = HeaderRepeat.FIRST_PAGE_ONLY
    markup: str = Field(
        ...,
        description="Raw LaTeX placed in the page header. Not escaped.",
    )


class PdfOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_numbers: PageNumbers = PageNumbers.NUMERIC
    header: HeaderOptions
    title: Optional[str] = None


def build_pdf_options(title: Optional[str] = None) -> PdfOptions:
    """
    Return the fixed layout used for every status document.

    ``title`` only sets document metadata; it does not affect layout.
    """
    return PdfOptions(
        title=title,
        page_numbers=PageNumbers.NUMERIC,
        header=HeaderOptions(
            repeat=HeaderRepeat.FIRST_PAGE_ONLY,
            markup=PDF_HEADER,
        ),
    )
