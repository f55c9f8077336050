"""
Markup rendering service.

Renders a status document view-model into a LaTeX body using a Jinja2
template located by a full locator (base location + template path).

Design guarantees:
- Deterministic template rendering (Jinja2 + StrictUndefined)
- LaTeX-safe delimiters, so templates stay valid LaTeX to the eye
- View-model values are never transformed, only formatted by filters

The produced markup is a document *body*. Page layout (preamble,
header, page numbering) is applied by the document converter.
"""

import re
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from pydantic import BaseModel

from statusdoc.app.exceptions import TemplateRenderError


_FILE_SCHEME = "file://"

_LATEX_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_LATEX_SPECIAL_RE = re.compile(
    "|".join(re.escape(char) for char in _LATEX_SPECIAL_CHARS)
)

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def escape_latex(value: Any) -> str:
    """Escape LaTeX special characters in ``value``."""
    if value is None:
        return ""
    return _LATEX_SPECIAL_RE.sub(
        lambda match: _LATEX_SPECIAL_CHARS[match.group()],
        str(value),
    )


def format_money(value: Union[Decimal, int, str]) -> str:
    """Format a monetary amount with thousands separators and two decimals."""
    return "{:,.2f}".format(Decimal(value))


def format_long_date(value: date) -> str:
    """
    Format a date as ``15 March 2024``.

    Month names are fixed English; ``strftime("%B")`` would follow LC_TIME.
    """
    return f"{value.day:02d} {_MONTH_NAMES[value.month - 1]} {value.year}"


def locator_to_path(locator: str) -> Path:
    """
    Convert a full locator into a filesystem path.

    Accepts plain paths and ``file://`` URIs.
    """
    if locator.startswith(_FILE_SCHEME):
        locator = locator[len(_FILE_SCHEME):]
    return Path(locator)


def _build_environment(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(template_dir),
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
    )
    env.filters["tex"] = escape_latex
    env.filters["money"] = format_money
    env.filters["long_date"] = format_long_date
    return env


class JinjaViewGenerator:
    """
    Markup renderer backed by Jinja2 templates on the local filesystem.
    """

    def generate_from_path(self, locator: str, view_model: BaseModel) -> str:
        template_file = locator_to_path(locator)

        if not template_file.is_file():
            raise TemplateRenderError(
                f"Template not found at locator '{locator}'."
            )

        env = _build_environment(template_file.parent)

        try:
            template = env.get_template(template_file.name)
            return template.render(view_model.model_dump())
        except TemplateError as exc:
            raise TemplateRenderError(
                f"Failed to render template '{locator}': {exc}"
            ) from exc
