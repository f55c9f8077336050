"""
Template catalogue and schema introspection endpoints.

Exposes the registered status document templates and the JSON schema of
the view-model each one renders. Both routes are read-only and served
entirely from the in-process registry.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from statusdoc.app.registry.registry import TEMPLATE_REGISTRY

router = APIRouter()


class TemplateListItem(BaseModel):
    name: str
    description: str


# ---------------------------------------------------------------------------
# GET /templates
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=List[TemplateListItem],
    summary="List registered status document templates",
)
def list_templates() -> List[TemplateListItem]:
    return [
        TemplateListItem(name=entry.name, description=entry.description)
        for entry in TEMPLATE_REGISTRY.values()
    ]


# ---------------------------------------------------------------------------
# GET /templates/schema/{name}
# ---------------------------------------------------------------------------


@router.get(
    "/schema/{name}",
    summary="Return the JSON schema of a template's view-model",
)
def get_template_schema(name: str) -> Dict[str, Any]:
    """
    Return the JSON schema of the view-model rendered by ``name``.

    The view-models forbid extra fields, so the schema is closed.
    """
    entry = TEMPLATE_REGISTRY.get(name)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"Template '{name}' not found.",
        )

    schema = entry.view_model.model_json_schema()
    schema.setdefault("additionalProperties", False)

    return schema
