"""Aliven Paths command line — local drafts, previews, PDF export, web server.

Usage:
    aliven-paths serve
    aliven-paths paths
    aliven-paths preview stillness
    aliven-paths export stillness -o stillness.pdf
    aliven-paths drafts save "Morning focus" --path stillness --prompt 2 "What is here?"
    aliven-paths drafts list
    aliven-paths drafts link <draft-id>
    aliven-paths export stillness --draft <draft-id>

Drafts are stored on this machine only (ALIVEN_DRAFTS_FILE).
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from aliven_paths import config
from aliven_paths.content import PATHS, get_path, get_prompt_pack
from aliven_paths.services.drafts import DraftStore, JsonFileStorage, new_draft
from aliven_paths.services.handoff import draft_query
from aliven_paths.services.pdf_export import PdfExporter, PdfRenderError
from aliven_paths.services.rhythm import WEEKS, build_export_payload, build_weeks

logger = logging.getLogger(__name__)


def _store(args) -> DraftStore:
    return DraftStore(JsonFileStorage(Path(args.drafts_file)))


def _require_path(path_id: str) -> dict:
    path = get_path(path_id)
    if not path:
        known = ", ".join(p["id"] for p in PATHS)
        print(f"ERROR: Unknown path '{path_id}'. Choose one of: {known}", file=sys.stderr)
        sys.exit(2)
    return path


def _weeks_for(args) -> tuple[dict, list[dict]]:
    """Path and week entries, with a saved draft's overrides when --draft is given."""
    prompts, practices = {}, {}
    path_id = args.path
    if getattr(args, "draft", None):
        draft = _store(args).get(args.draft)
        if draft is None:
            print(f"ERROR: Draft '{args.draft}' not found", file=sys.stderr)
            sys.exit(1)
        path_id = path_id or draft.pathId
        prompts, practices = draft.draftPrompts, draft.draftPractices
    if not path_id:
        print("ERROR: Pick a main path first.", file=sys.stderr)
        sys.exit(2)
    path = _require_path(path_id)
    return path, build_weeks(path, get_prompt_pack(), prompts, practices)


def _week_overrides(pairs) -> dict[int, str]:
    overrides = {}
    for week, text in pairs or []:
        week = int(week)
        if week not in WEEKS:
            raise SystemExit(f"ERROR: week must be one of {list(WEEKS)}, got {week}")
        overrides[week] = text
    return overrides


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_serve(args) -> int:
    import uvicorn

    from aliven_paths.app import create_app

    print("=" * 60)
    print("  Aliven — Path Builder")
    print("=" * 60)
    print(f"\n  Builder: http://{args.host}:{args.port}")
    print("  Press Ctrl+C to stop\n")

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level="info")
    return 0


def cmd_paths(args) -> int:
    for p in PATHS:
        supports = ", ".join(p["supports"])
        print(f"{p['id']:<20} {p['name']}")
        print(f"{'':<20} {p['mainPillar']} + {supports}")
    return 0


def cmd_preview(args) -> int:
    path, weeks = _weeks_for(args)
    print(path["name"])
    for w in weeks:
        print(f"\nWeek {w['week']}")
        print(f"  Practices: {w['practices']}")
        print(f"  Prompt:    {w['prompt']}")
    return 0


def cmd_export(args) -> int:
    path, weeks = _weeks_for(args)
    payload = build_export_payload(path, weeks)
    if args.title:
        payload["title"] = args.title

    try:
        result = asyncio.run(PdfExporter().export(payload))
    except PdfRenderError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    output = Path(args.output or result.filename)
    output.write_bytes(result.content)
    print(f"Wrote {output} ({len(result.content)} bytes)")
    return 0


def cmd_drafts_list(args) -> int:
    drafts = _store(args).list()
    if not drafts:
        print("No saved drafts yet.")
        return 0
    for d in drafts:
        print(f"{d.id}  {d.name}  (path: {d.pathId}, updated: {d.updatedAt})")
    return 0


def cmd_drafts_show(args) -> int:
    draft = _store(args).get(args.id)
    if draft is None:
        print(f"ERROR: Draft '{args.id}' not found", file=sys.stderr)
        return 1
    print(json.dumps(draft.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_drafts_save(args) -> int:
    _require_path(args.path)
    try:
        draft = new_draft(
            args.name,
            args.path,
            draft_prompts=_week_overrides(args.prompt),
            draft_practices=_week_overrides(args.practices),
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    _store(args).save(draft)
    print(f"Draft saved: {draft.id}")
    return 0


def cmd_drafts_delete(args) -> int:
    _store(args).delete(args.id)
    print(f"Deleted {args.id}")
    return 0


def cmd_drafts_clear(args) -> int:
    _store(args).clear()
    print("All drafts deleted")
    return 0


def cmd_drafts_link(args) -> int:
    draft = _store(args).get(args.id)
    if draft is None:
        print(f"ERROR: Draft '{args.id}' not found", file=sys.stderr)
        return 1
    query = draft_query(draft.pathId, draft.draftPrompts, draft.draftPractices)
    print(f"{args.base_url.rstrip('/')}/?{query}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aliven-paths", description="Aliven path builder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--drafts-file", default=str(config.DRAFTS_FILE),
                        help="Local draft storage file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("serve", help="Run the builder web app")
    p.add_argument("--host", default=config.HOST)
    p.add_argument("--port", type=int, default=config.PORT)
    p.set_defaults(func=cmd_serve)

    p = sub.add_parser("paths", help="List available paths")
    p.set_defaults(func=cmd_paths)

    for name, func, help_text in (
        ("preview", cmd_preview, "Print the four-week rhythm"),
        ("export", cmd_export, "Export the four-week rhythm as PDF"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("path", nargs="?", default="", help="Path id (optional with --draft)")
        p.add_argument("--draft", help="Apply a saved draft's overrides")
        if name == "export":
            p.add_argument("-o", "--output", help="Output file (default: sanitized path name)")
            p.add_argument("--title", help="Document title")
        p.set_defaults(func=func)

    drafts = sub.add_parser("drafts", help="Manage locally saved drafts")
    dsub = drafts.add_subparsers(dest="drafts_command", required=True)

    p = dsub.add_parser("list", help="List drafts, most recent first")
    p.set_defaults(func=cmd_drafts_list)

    p = dsub.add_parser("show", help="Print a draft as JSON")
    p.add_argument("id")
    p.set_defaults(func=cmd_drafts_show)

    p = dsub.add_parser("save", help="Save a new draft")
    p.add_argument("name")
    p.add_argument("--path", required=True, help="Path id")
    p.add_argument("--prompt", nargs=2, action="append", metavar=("WEEK", "TEXT"),
                   help="Override a week's journal prompt (repeatable)")
    p.add_argument("--practices", nargs=2, action="append", metavar=("WEEK", "TEXT"),
                   help="Override a week's practices (repeatable)")
    p.set_defaults(func=cmd_drafts_save)

    p = dsub.add_parser("delete", help="Delete one draft")
    p.add_argument("id")
    p.set_defaults(func=cmd_drafts_delete)

    p = dsub.add_parser("clear", help="Delete all drafts")
    p.set_defaults(func=cmd_drafts_clear)

    p = dsub.add_parser("link", help="Print a builder URL that reopens a draft")
    p.add_argument("id")
    p.add_argument("--base-url", default=f"http://localhost:{config.PORT}")
    p.set_defaults(func=cmd_drafts_link)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
