"""Path builder routes — pick a path, preview/edit the rhythm, export or hand off."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from aliven_paths.config import WEB_TEMPLATES_DIR
from aliven_paths.content import PATHS, get_path, get_prompt_pack
from aliven_paths.routers.export_pdf import export_or_fail, get_exporter
from aliven_paths.services.handoff import draft_query, parse_draft_query
from aliven_paths.services.pdf_export import PdfExporter
from aliven_paths.services.rhythm import (
    WEEKS,
    build_export_payload,
    build_weeks,
    default_practices,
)
from aliven_paths.services.prompts import get_prompt_for_week

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))


def _overrides_from_form(form, path: dict, pack: dict) -> tuple[dict[int, str], dict[int, str]]:
    """Week overrides from builder form fields; values equal to the default are not overrides."""
    prompts, practices = {}, {}
    for week in WEEKS:
        prompt = form.get(f"prompt_{week}")
        if prompt is not None and prompt != get_prompt_for_week(pack, path["id"], week - 1):
            prompts[week] = prompt
        practice = form.get(f"practices_{week}")
        if practice is not None and practice != default_practices(path, week):
            practices[week] = practice
    return prompts, practices


@router.get("/", response_class=HTMLResponse)
async def builder_page(
    request: Request,
    path: str = Query("", description="Selected path id"),
    edit: bool = Query(False, description="Show editable fields"),
):
    draft_path_id, draft_prompts, draft_practices = parse_draft_query(request.query_params)
    selected = get_path(draft_path_id or path)
    pack = get_prompt_pack()

    weeks = []
    if selected:
        weeks = build_weeks(selected, pack, draft_prompts, draft_practices)

    return templates.TemplateResponse(request, "builder.html", {
        "active_page": "builder",
        "paths": PATHS,
        "selected": selected,
        "pack": pack,
        "weeks": weeks,
        "edit": edit or bool(draft_path_id),
        "has_overrides": bool(draft_prompts or draft_practices),
    })


@router.post("/builder/export")
async def builder_export(request: Request, exporter: PdfExporter = Depends(get_exporter)):
    form = await request.form()
    selected = get_path(form.get("path_id"))
    if not selected:
        return HTMLResponse('<p class="error">Pick a main path first.</p>', status_code=400)

    pack = get_prompt_pack()
    prompts, practices = _overrides_from_form(form, selected, pack)
    weeks = build_weeks(selected, pack, prompts, practices)
    payload = build_export_payload(selected, weeks)
    payload["filename"] = f"aliven-rhythm-preview-{selected['id']}"
    return await export_or_fail(exporter, payload)


@router.post("/builder/link")
async def builder_link(request: Request):
    """Redirect to the builder with the edited weeks encoded in the URL."""
    form = await request.form()
    selected = get_path(form.get("path_id"))
    if not selected:
        return RedirectResponse("/", status_code=303)

    prompts, practices = _overrides_from_form(form, selected, get_prompt_pack())
    query = draft_query(selected["id"], prompts, practices)
    return RedirectResponse(f"/?edit=1&{query}", status_code=303)
