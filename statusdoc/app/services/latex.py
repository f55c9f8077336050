"""
LaTeX document conversion service.

This module turns a rendered markup body into the final status document
PDF using LuaLaTeX.

The body produced by the templates is wrapped in a preamble that realises
the ``PdfOptions`` layout: arabic page numbers in the
footer and the header markup on the first page only.

Design guarantees:
- No shell escape or external execution from within LaTeX
- Compilation halted on the first LaTeX error
- Every compilation runs in its own temporary directory
"""

import io
import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import pikepdf
from jinja2 import Environment, StrictUndefined

from statusdoc.app.exceptions import LaTeXCompilationError
from statusdoc.app.schemas.pdf_options import PdfOptions

logger = logging.getLogger(__name__)


PRODUCER = "statusdoc"

DOCUMENT_WRAPPER = r"""\documentclass[11pt,a4paper]{article}
\usepackage{fontspec}
\usepackage[margin=2.5cm,headheight=30pt]{geometry}
\usepackage{booktabs}
\usepackage{fancyhdr}

\fancypagestyle{firstpage}{%
  \fancyhf{}%
  \fancyhead[C]{\makebox[\textwidth]{\VAR{header_markup}}}%
  \fancyfoot[C]{\thepage}%
  \renewcommand{\headrulewidth}{0.4pt}%
}
\fancypagestyle{body}{%
  \fancyhf{}%
  \renewcommand{\headrulewidth}{0pt}%
  \fancyfoot[C]{\thepage}%
}
\pagestyle{body}
\pagenumbering{arabic}

\begin{document}
\thispagestyle{firstpage}
\VAR{body}
\end{document}
"""


def _wrapper_environment() -> Environment:
    return Environment(
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def build_latex_source(markup: str, options: PdfOptions) -> str:
    """
    Wrap a markup body in the preamble realising ``options``.
    """
    template = _wrapper_environment().from_string(DOCUMENT_WRAPPER)
    return template.render(
        header_markup=options.header.markup,
        body=markup,
    )


class PdfDocument:
    """
    A compiled status document.

    ``to_bytes`` serializes the PDF through pikepdf, stamping the
    document information dictionary on the way out.
    """

    def __init__(self, pdf_bytes: bytes, *, title: Optional[str] = None) -> None:
        self._pdf_bytes = pdf_bytes
        self.title = title

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()

        with pikepdf.open(io.BytesIO(self._pdf_bytes)) as pdf:
            pdf.docinfo["/Producer"] = PRODUCER
            if self.title:
                pdf.docinfo["/Title"] = self.title
            pdf.save(buffer)

        return buffer.getvalue()


class LuaLatexPdfGenerator:
    """
    Document converter compiling LaTeX markup with LuaLaTeX.
    """

    def __init__(
        self,
        *,
        timeout_seconds: int = 60,
        lualatex_command: str = "lualatex",
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._lualatex_command = lualatex_command

    def generate_from_markup(self, markup: str, options: PdfOptions) -> PdfDocument:
        source = build_latex_source(markup, options)

        with tempfile.TemporaryDirectory() as tmp:
            outdir = Path(tmp)
            pdf_file = self._compile(source, outdir)
            pdf_bytes = pdf_file.read_bytes()

        return PdfDocument(pdf_bytes, title=options.title)

    def _compile(self, source: str, outdir: Path) -> Path:
        tex_file = outdir / "document.tex"
        tex_file.write_text(source, encoding="utf-8")

        command = [
            self._lualatex_command,
            "-interaction=nonstopmode",
            "-halt-on-error",
            "-no-shell-escape",
            f"-output-directory={outdir}",
            tex_file.name,
        ]

        logger.debug("Invoking LuaLaTeX in %s", outdir)

        try:
            process = subprocess.run(
                command,
                cwd=outdir,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self._timeout_seconds,
                env=os.environ.copy(),
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise LaTeXCompilationError(
                f"Failed to invoke LuaLaTeX: {exc}"
            ) from exc

        stdout = process.stdout.decode("utf-8", errors="ignore")
        stderr = process.stderr.decode("utf-8", errors="ignore")

        if process.returncode != 0:
            raise LaTeXCompilationError(
                "LuaLaTeX compilation failed.\n\n"
                "STDOUT:\n"
                f"{stdout}\n\n"
                "STDERR:\n"
                f"{stderr}"
            )

        pdf_file = outdir / "document.pdf"
        if not pdf_file.exists():
            raise LaTeXCompilationError(
                "LuaLaTeX reported success, but no PDF output was produced."
            )

        return pdf_file
