"""Command-line interface for the clipboard history store."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from ._utils import format_timestamp, preview_text
from .config import ClippyPaths, load_config
from .constants import DEFAULT_LIST_COUNT
from .errors import ClippyError
from .log import logger, setup_logging
from .manager import ClipboardManager
from .models import ImageRecord, Record
from .platform import copy_to_clipboard


def _label_part(record: Record) -> str:
    return f" [{record.label}]" if record.label else ""


def _row(index: int, record: Record) -> str:
    label = f"{{{record.label}}} " if record.label else ""
    return (
        f"  {index:2d}. [{format_timestamp(record.created_at)}] "
        f"{label}{preview_text(record.content)}"
    )


def _copy(record: Record) -> str:
    """Put *record* on the system clipboard; returns what was copied."""
    value = str(record.path) if isinstance(record, ImageRecord) else record.content
    if not copy_to_clipboard(value):
        raise ClippyError("No clipboard tool available")
    return value


# ---------------------------------------------------------------------------
# History commands
# ---------------------------------------------------------------------------


def cmd_list(manager: ClipboardManager, args: argparse.Namespace) -> int:
    history = manager.list_history()
    if not history:
        print("No clipboard history.")
        print("Feed it with: <watcher> | clippy capture")
        return 0
    count = args.count if args.count and args.count > 0 else DEFAULT_LIST_COUNT
    shown = history[:count]
    print(f"Clipboard History (showing {len(shown)} of {len(history)}):\n")
    for i, record in enumerate(shown, 1):
        print(_row(i, record))
    print("\nUse 'clippy get <N>' to copy, 'clippy pin <N>' to save permanently.")
    return 0


def cmd_get(manager: ClipboardManager, args: argparse.Namespace) -> int:
    record = manager.get_history(args.index)
    _copy(record)
    print(f"Copied to clipboard: {preview_text(record.content)}")
    return 0


def cmd_raw(manager: ClipboardManager, args: argparse.Namespace) -> int:
    record = manager.get_history(args.index)
    sys.stdout.write(record.content)
    return 0


def cmd_clear(manager: ClipboardManager, args: argparse.Namespace) -> int:
    if manager.clear():
        print("Clipboard history cleared.")
    else:
        print("History already empty.")
    return 0


def cmd_search(manager: ClipboardManager, args: argparse.Namespace) -> int:
    query = " ".join(args.query)
    hits = manager.search(query)
    if not hits:
        print(f"No results found for '{query}'.")
        return 0
    print(f"Search results for '{query}' ({len(hits)} matches):\n")
    for hit in hits:
        row = _row(hit.index, hit.record)
        print(f"{row}  (pin)" if hit.pinned else row)
    print("\nUse 'clippy get <N>' to copy, 'clippy paste <N>' for pins.")
    return 0


def cmd_capture(manager: ClipboardManager, args: argparse.Namespace) -> int:
    if args.image:
        record = manager.capture_image(Path(args.image).read_bytes())
    else:
        record = manager.capture_text(sys.stdin.read().strip())
    if record is None:
        logger.debug("nothing captured")
    return 0


# ---------------------------------------------------------------------------
# Pin commands
# ---------------------------------------------------------------------------


def cmd_pin(manager: ClipboardManager, args: argparse.Namespace) -> int:
    position = manager.pin(args.index, args.label)
    record = manager.get_pin(position)
    print(f"Pinned as #{position}{_label_part(record)}: {preview_text(record.content)}")
    return 0


def cmd_pins(manager: ClipboardManager, args: argparse.Namespace) -> int:
    pins = manager.list_pins()
    if not pins:
        print("No pinned items.")
        print("Use 'clippy pin <N>' to pin an item from history.")
        return 0
    print(f"Pinned Items ({len(pins)}):\n")
    for i, record in enumerate(pins, 1):
        print(_row(i, record))
    print("\nUse 'clippy paste <N>' to copy a pinned item to clipboard.")
    return 0


def cmd_paste(manager: ClipboardManager, args: argparse.Namespace) -> int:
    record = manager.get_pin(args.index)
    _copy(record)
    print(
        f"Copied pin #{args.index}{_label_part(record)} to clipboard: "
        f"{preview_text(record.content)}"
    )
    return 0


def cmd_unpin(manager: ClipboardManager, args: argparse.Namespace) -> int:
    record = manager.unpin(args.index)
    print(f"Unpinned #{args.index}{_label_part(record)}: {preview_text(record.content)}")
    return 0


# ---------------------------------------------------------------------------
# Maintenance & picker
# ---------------------------------------------------------------------------


def cmd_cleanup(manager: ClipboardManager, args: argparse.Namespace) -> int:
    result = manager.cleanup()
    print(
        f"Removed {result.history_removed} history, {result.pins_removed} pins "
        f"(older than {manager.config.max_age_days} days)."
    )
    return 0


def cmd_pick(manager: ClipboardManager, args: argparse.Namespace) -> int:
    from .picker import run_picker

    record = run_picker(manager)
    if record is None:
        return 1
    _copy(record)
    print(f"Copied to clipboard: {preview_text(record.content)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clippy", description="Clipboard history with pins and fuzzy search"
    )
    parser.add_argument(
        "--version", "-V", action="version", version=f"clippy {__version__}"
    )
    parser.add_argument("--config", type=Path, help="Config file (default ~/.clippy.yaml)")
    parser.add_argument("--home", type=Path, help="Directory holding the data files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = sub.add_parser("list", aliases=["ls"], help="Show the last N history items")
    p.add_argument("count", type=int, nargs="?", default=DEFAULT_LIST_COUNT)
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("get", help="Copy history item N to the clipboard")
    p.add_argument("index", type=int)
    p.set_defaults(func=cmd_get)

    p = sub.add_parser("raw", help="Print history item N (for scripting)")
    p.add_argument("index", type=int)
    p.set_defaults(func=cmd_raw)

    p = sub.add_parser("search", help="Fuzzy-search history and pins")
    p.add_argument("query", nargs="+")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("clear", help="Delete all clipboard history")
    p.set_defaults(func=cmd_clear)

    p = sub.add_parser("capture", help="Record text from stdin (or an image file)")
    p.add_argument("--image", help="PNG file to record instead of stdin text")
    p.set_defaults(func=cmd_capture)

    p = sub.add_parser("pin", help="Pin history item N (optional label)")
    p.add_argument("index", type=int)
    p.add_argument("label", nargs="?")
    p.set_defaults(func=cmd_pin)

    p = sub.add_parser("pins", help="List pinned items")
    p.set_defaults(func=cmd_pins)

    p = sub.add_parser("paste", help="Copy pinned item N to the clipboard")
    p.add_argument("index", type=int)
    p.set_defaults(func=cmd_paste)

    p = sub.add_parser("unpin", help="Remove pinned item N")
    p.add_argument("index", type=int)
    p.set_defaults(func=cmd_unpin)

    p = sub.add_parser("cleanup", help="Remove entries older than max_age_days")
    p.set_defaults(func=cmd_cleanup)

    p = sub.add_parser("pick", help="Interactive fuzzy picker")
    p.set_defaults(func=cmd_pick)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the clippy CLI. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    setup_logging(args.verbose)
    manager = ClipboardManager(load_config(args.config), ClippyPaths.from_home(args.home))
    try:
        return args.func(manager, args)
    except ClippyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
