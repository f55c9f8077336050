"""
Status document endpoint.

Clients supply an application id only. Template selection, view-model
population, rendering and PDF conversion are performed by the
document generator.

The X-Document-Hash response header carries the SHA-256 digest of the
returned PDF so clients can match a download against server logs.
"""

import io
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from statusdoc.app.api.deps import get_document_generator
from statusdoc.app.config import Settings, get_settings
from statusdoc.app.services.generator import ApplicationDocumentGenerator
from statusdoc.app.utils.hashing import compute_document_hash

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------


@router.get(
    "/{application_id}/document",
    summary="Generate the status document for an application",
)
def generate_status_document(
    application_id: UUID,
    settings: Settings = Depends(get_settings),
    generator: ApplicationDocumentGenerator = Depends(get_document_generator),
) -> StreamingResponse:
    """
    Generate the PDF status document for an application.

    Returns application/pdf, or 404 when the application does not exist
    or its state has no status document.
    """

    try:
        pdf_bytes = generator.generate(application_id, str(settings.template_dir))
    except Exception as exc:
        logger.exception(
            "Status document generation failed for application='%s'",
            application_id,
        )
        raise HTTPException(
            status_code=500,
            detail="Document generation failed. See service logs for details.",
        ) from exc

    if pdf_bytes is None:
        raise HTTPException(
            status_code=404,
            detail=f"No status document available for application '{application_id}'.",
        )

    # ------------------------------------------------------------------
    # Response (streamed binary, headers always present)
    # ------------------------------------------------------------------
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'inline; filename="application-{application_id}.pdf"',
            "X-Document-Hash": compute_document_hash(pdf_bytes),
        },
    )
