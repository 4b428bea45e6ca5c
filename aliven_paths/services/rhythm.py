"""Four-week rhythm — derives week entries for a path plus user overrides."""

from datetime import datetime, timezone

from aliven_paths.services.prompts import get_prompt_for_week

WEEKS = (1, 2, 3, 4)

PREVIEW_TITLE = "Aliven Rhythm Preview"


def support_for_week(path: dict, week: int) -> str:
    """Supporting pillar for a week: a single support repeats, two alternate."""
    supports = path.get("supports") or []
    if not supports:
        return ""
    if len(supports) == 1:
        return supports[0]
    return supports[(week - 1) % 2]


def default_practices(path: dict, week: int) -> str:
    support = support_for_week(path, week)
    if not support:
        return path.get("mainPillar", "")
    return f"{path.get('mainPillar', '')} + {support}"


def build_weeks(
    path: dict,
    pack: dict,
    draft_prompts: dict[int, str] | None = None,
    draft_practices: dict[int, str] | None = None,
) -> list[dict]:
    """Build the four week entries, applying any per-week overrides.

    An override replaces the computed default only when its week key is
    present; an empty string is a valid override.
    """
    draft_prompts = draft_prompts or {}
    draft_practices = draft_practices or {}

    weeks = []
    for week in WEEKS:
        prompt = draft_prompts.get(week)
        if prompt is None:
            prompt = get_prompt_for_week(pack, path["id"], week - 1)

        practices = draft_practices.get(week)
        if practices is None:
            practices = default_practices(path, week)

        weeks.append({"week": week, "practices": practices, "prompt": prompt})
    return weeks


def build_export_payload(path: dict, weeks: list[dict], title: str = PREVIEW_TITLE) -> dict:
    """JSON body the builder sends to the export endpoint."""
    return {
        "title": title,
        "pathId": path["id"],
        "pathName": path["name"],
        "createdAt": datetime.now(timezone.utc).isoformat(),
        "weeks": weeks,
    }


def coerce_week_map(raw) -> dict[int, str]:
    """Parse a week → text mapping (JSON object keys arrive as strings).

    Keys outside 1–4 and non-string values are dropped.
    """
    if not isinstance(raw, dict):
        return {}

    result = {}
    for key, value in raw.items():
        try:
            week = int(key)
        except (TypeError, ValueError):
            continue
        if week in WEEKS and isinstance(value, str):
            result[week] = value
    return result
