"""Content registry — loads path and prompt pack definitions."""

from aliven_paths.content.paths import PATHS
from aliven_paths.content.default_pack import PACK as default_pack

DEFAULT_PACK_ID = default_pack["id"]

PROMPT_PACKS: dict[str, dict] = {
    default_pack["id"]: default_pack,
}

_PATHS_BY_ID: dict[str, dict] = {p["id"]: p for p in PATHS}


def get_path(path_id: str | None) -> dict | None:
    """Get a path definition by ID."""
    if not path_id:
        return None
    return _PATHS_BY_ID.get(path_id)


def get_prompt_pack(pack_id: str | None = None) -> dict | None:
    """Get a prompt pack by ID (default pack when no ID is given)."""
    return PROMPT_PACKS.get(pack_id or DEFAULT_PACK_ID)
