"""Draft store — named snapshots of edited prompts/practices, kept client-side.

The whole collection lives in one versioned slot and is read and written
wholesale on every mutation. Storage failures never reach the caller:
reads degrade to an empty list, failed writes are logged and dropped.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from aliven_paths.content import DEFAULT_PACK_ID
from aliven_paths.services.rhythm import coerce_week_map

logger = logging.getLogger(__name__)

DRAFTS_KEY = "aliven:pathbuilder:drafts:v1"


@dataclass
class SavedDraft:
    """A user-named snapshot of week overrides for one path."""
    id: str
    name: str
    createdAt: str
    updatedAt: str
    packId: str
    pathId: str
    draftPrompts: dict[int, str] = field(default_factory=dict)
    draftPractices: dict[int, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.createdAt,
            "updatedAt": self.updatedAt,
            "packId": self.packId,
            "pathId": self.pathId,
            "draftPrompts": {str(k): v for k, v in self.draftPrompts.items()},
            "draftPractices": {str(k): v for k, v in self.draftPractices.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> SavedDraft:
        """Parse a stored record. Raises ValueError if required fields are missing."""
        if not isinstance(data, dict):
            raise ValueError("draft record must be an object")
        try:
            return cls(
                id=str(data["id"]),
                name=str(data.get("name", "")),
                createdAt=str(data.get("createdAt", "")),
                updatedAt=str(data.get("updatedAt", "")),
                packId=str(data.get("packId", DEFAULT_PACK_ID)),
                pathId=str(data["pathId"]),
                draftPrompts=coerce_week_map(data.get("draftPrompts")),
                draftPractices=coerce_week_map(data.get("draftPractices")),
            )
        except KeyError as e:
            raise ValueError(f"draft record missing {e.args[0]}") from e


def new_draft(
    name: str,
    path_id: str,
    draft_prompts: dict[int, str] | None = None,
    draft_practices: dict[int, str] | None = None,
    pack_id: str = DEFAULT_PACK_ID,
) -> SavedDraft:
    """Create a draft with a fresh id; createdAt and updatedAt are identical."""
    name = (name or "").strip()
    if not name:
        raise ValueError("Draft name is required")
    if not path_id:
        raise ValueError("Pick a main path first, then save.")

    now = datetime.now(timezone.utc).isoformat()
    return SavedDraft(
        id=str(uuid.uuid4()),
        name=name,
        createdAt=now,
        updatedAt=now,
        packId=pack_id,
        pathId=path_id,
        draftPrompts=dict(draft_prompts or {}),
        draftPractices=dict(draft_practices or {}),
    )


# ---------------------------------------------------------------------------
# Storage backings
# ---------------------------------------------------------------------------

class MemoryStorage:
    """Key/value slots held in memory."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.slots: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self.slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.slots[key] = value


class JsonFileStorage:
    """Key/value slots persisted as one JSON object in a local file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_slots(self) -> dict:
        if not self.path.exists():
            return {}
        slots = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(slots, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return slots

    def get_item(self, key: str) -> str | None:
        return self._read_slots().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            slots = self._read_slots()
        except ValueError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            slots = {}
        slots[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(slots, indent=2), encoding="utf-8")
        tmp.replace(self.path)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class DraftStore:
    """list/save/delete/clear over a single serialized draft collection."""

    def __init__(self, storage, key: str = DRAFTS_KEY):
        self.storage = storage
        self.key = key

    def _read(self) -> list[SavedDraft]:
        try:
            raw = self.storage.get_item(self.key)
            if not raw:
                return []
            parsed = json.loads(raw)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not read drafts from %s: %s", self.key, e)
            return []

        if not isinstance(parsed, list):
            return []

        drafts = []
        for item in parsed:
            try:
                drafts.append(SavedDraft.from_dict(item))
            except ValueError as e:
                logger.debug("Skipping invalid draft record: %s", e)
        return drafts

    def _write(self, drafts: list[SavedDraft]) -> None:
        try:
            self.storage.set_item(self.key, json.dumps([d.to_dict() for d in drafts]))
        except (OSError, ValueError) as e:
            logger.warning("Could not write drafts to %s: %s", self.key, e)

    def list(self) -> list[SavedDraft]:
        """All drafts, most recently updated first."""
        return sorted(self._read(), key=lambda d: d.updatedAt or "", reverse=True)

    def get(self, draft_id: str) -> SavedDraft | None:
        for draft in self._read():
            if draft.id == draft_id:
                return draft
        return None

    def save(self, draft: SavedDraft) -> list[SavedDraft]:
        """Prepend a draft, replacing any stored draft with the same id.

        Returns the collection as the caller should see it.
        """
        drafts = [d for d in self._read() if d.id != draft.id]
        drafts.insert(0, draft)
        self._write(drafts)
        return drafts

    def delete(self, draft_id: str) -> list[SavedDraft]:
        drafts = [d for d in self._read() if d.id != draft_id]
        self._write(drafts)
        return drafts

    def clear(self) -> list[SavedDraft]:
        self._write([])
        return []
