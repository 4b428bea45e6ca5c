"""PDF export API — POST /api/export-pdf."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from aliven_paths.services.pdf_export import ExportResult, PdfExporter, PdfRenderError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_exporter() -> PdfExporter:
    """Exporter for one request (overridden in tests)."""
    return PdfExporter()


def pdf_response(result: ExportResult) -> Response:
    return Response(
        content=result.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


async def export_or_fail(exporter: PdfExporter, body) -> Response:
    """Run an export; render failures become a 500 with a plain-text diagnostic."""
    try:
        result = await exporter.export(body)
    except PdfRenderError as e:
        logger.error("Export failed: %s", e)
        return PlainTextResponse(str(e), status_code=500)
    return pdf_response(result)


@router.post(
    "/api/export-pdf",
    summary="Export a plan as PDF",
    description=(
        "Accepts ready-made HTML or a structured plan payload "
        "(title, pathId, pathName, createdAt, weeks, filename) and returns "
        "the rendered PDF as an attachment. A body that is not valid JSON "
        "exports the default document."
    ),
    tags=["Export"],
)
async def export_pdf(request: Request, exporter: PdfExporter = Depends(get_exporter)):
    try:
        body = await request.json()
    except ValueError:
        logger.debug("Export body is not valid JSON, using defaults")
        body = {}
    return await export_or_fail(exporter, body)
