"""Prompt resolver — week index → journal prompt from a prompt pack."""


def get_prompt_for_week(pack: dict, path_id: str, week_index: int) -> str:
    """Return the pack's prompt for a zero-based week index.

    Out-of-range indices clamp to the first/last prompt, so a pack with
    fewer than four prompts repeats its final prompt. Returns "" when the
    pack has no prompts for the path.
    """
    prompts = (pack or {}).get("promptsByPathId", {}).get(path_id)
    if not prompts:
        return ""

    if week_index < 0:
        idx = 0
    elif week_index >= len(prompts):
        idx = len(prompts) - 1
    else:
        idx = week_index

    return prompts[idx] or ""
