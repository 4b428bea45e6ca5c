"""Draft handoff — encode/decode a draft as builder URL query parameters."""

import json
import logging
from urllib.parse import urlencode

from aliven_paths.services.rhythm import coerce_week_map

logger = logging.getLogger(__name__)


def draft_query(
    path_id: str,
    draft_prompts: dict[int, str] | None = None,
    draft_practices: dict[int, str] | None = None,
) -> str:
    """Query string that reopens the builder on this draft."""
    return urlencode({
        "draftPathId": path_id,
        "draftPrompts": json.dumps({str(k): v for k, v in (draft_prompts or {}).items()}),
        "draftPractices": json.dumps({str(k): v for k, v in (draft_practices or {}).items()}),
    })


def _parse_map(raw: str | None, name: str) -> dict[int, str]:
    if not raw:
        return {}
    try:
        return coerce_week_map(json.loads(raw))
    except ValueError:
        logger.debug("Ignoring malformed %s parameter", name)
        return {}


def parse_draft_query(params) -> tuple[str | None, dict[int, str], dict[int, str]]:
    """Read draftPathId/draftPrompts/draftPractices from a query mapping.

    Malformed JSON maps are ignored rather than rejected.
    """
    path_id = params.get("draftPathId") or None
    prompts = _parse_map(params.get("draftPrompts"), "draftPrompts")
    practices = _parse_map(params.get("draftPractices"), "draftPractices")
    return path_id, prompts, practices
