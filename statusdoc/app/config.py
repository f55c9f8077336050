"""
Centralized configuration for the status document engine.

Pydantic v2 settings management: values are read from the environment
(prefix ``STATUSDOC_``) or a ``.env`` file, validated once, and frozen.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Optional

from pydantic import Field, StringConstraints
from pydantic_settings import BaseSettings, SettingsConfigDict


# -------------------------------------------------------------------------
# Reusable Type Aliases
# -------------------------------------------------------------------------

EnvRequired = Annotated[
    str,
    StringConstraints(min_length=1, strip_whitespace=True),
]

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


# -------------------------------------------------------------------------
# Settings Model
# -------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Engine settings parsed from the environment.

    ``support_email``, ``signature`` and ``tax_rate`` are copied into
    every status document. The remaining fields configure the shipped
    template renderer, document converter and application store.
    """

    # ---------------------------------------------------------------------
    # Document content
    # ---------------------------------------------------------------------

    support_email: EnvRequired = "support@example.com"
    signature: EnvRequired = "The Client Services Team"

    tax_rate: Annotated[
        Decimal,
        Field(
            default=Decimal("0.15"),
            ge=0,
            le=1,
            description="Tax rate applied to net fund value, as a fraction",
        ),
    ]

    # ---------------------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------------------

    template_dir: Annotated[
        Path,
        Field(
            default=DEFAULT_TEMPLATE_DIR,
            description="Base location the registered template paths are appended to",
        ),
    ]

    lualatex_command: EnvRequired = "lualatex"

    latex_timeout_seconds: Annotated[
        int,
        Field(
            default=60,
            ge=1,
            le=600,
            description="Hard upper bound on a single LuaLaTeX compilation",
        ),
    ]

    # ---------------------------------------------------------------------
    # Application store
    # ---------------------------------------------------------------------

    applications_file: Annotated[
        Optional[Path],
        Field(
            default=None,
            description="Optional JSON file used to seed the in-memory store",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="STATUSDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )


# -------------------------------------------------------------------------
# Settings Dependency Provider
# -------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Dependency injection provider for engine settings.

    Cached so the environment is parsed once per process.
    """
    return Settings()
