"""Command-line front door for lazydirs.

Parses CLI options, configures logging, and dispatches to the interactive
sidebar/history pickers or to the pinned-store and listing commands. The
selected directory is printed on stdout so shells can ``cd`` into it.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .features.history_modal import HistoryModal
from .features.sidebar import SidebarDirectories
from .list_model.grouped import filter_preserving_groups
from .render.frame import render_plain_dataset
from .render.theme import available_theme_names, resolve_theme
from .runtime.config import load_history_command, load_pinned_file_path, load_theme_name, save_theme_name
from .runtime.logging import configure_logging
from .search.fuzzy import LabelFuzzyScorer
from .sources.history import HistorySource
from .sources.pinned import pin_directory, unpin_directory
from .sources.sidebar import SidebarSources, build_sidebar_dataset


def _existing_dir(value: str) -> Path:
    """argparse type for an existing directory path."""
    path = Path(value).expanduser()
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"not a directory: {value!r}")
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazydirs",
        description="Pick a directory from well-known, pinned, removable, or recently visited locations.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name, remembered for later runs ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the log file (default: WARNING).")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file.")
    parser.add_argument("--debug", action="store_true", help="Shortcut for --log-level DEBUG.")
    parser.add_argument("--pinned-file", type=Path, default=None, help="Override the pinned-directories store.")

    commands = parser.add_subparsers(dest="command")
    commands.add_parser("sidebar", help="Browse grouped directories (default).")

    history = commands.add_parser("history", help="Pick a directory from visited history.")
    history.add_argument("--exclude", type=Path, default=None, help="Path to leave out (default: cwd).")

    pin = commands.add_parser("pin", help="Pin a directory to the sidebar.")
    pin.add_argument("path", type=_existing_dir)
    pin.add_argument("--name", default=None, help="Display name (default: directory name).")

    unpin = commands.add_parser("unpin", help="Remove a pinned directory.")
    unpin.add_argument("path", type=Path)

    listing = commands.add_parser("list", help="Print the sidebar directories without a TUI.")
    listing.add_argument("--query", default="", help="Fuzzy filter applied within each group.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested command; returns an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, debug=args.debug, log_file=args.log_file)

    pinned_path = args.pinned_file if args.pinned_file is not None else load_pinned_file_path()
    if args.theme is not None and args.theme.strip().lower() in available_theme_names():
        save_theme_name(args.theme.strip().lower())
    theme = resolve_theme(args.theme if args.theme is not None else load_theme_name())
    command = args.command or "sidebar"

    if command == "pin":
        changed = pin_directory(pinned_path, args.path, args.name)
        print("pinned" if changed else "already pinned", file=sys.stderr)
        return 0
    if command == "unpin":
        changed = unpin_directory(pinned_path, args.path)
        print("unpinned" if changed else "not pinned", file=sys.stderr)
        return 0 if changed else 1
    if command == "list":
        dataset = build_sidebar_dataset(SidebarSources.default(pinned_path))
        filtered = filter_preserving_groups(dataset, args.query, LabelFuzzyScorer())
        for line in render_plain_dataset(filtered):
            print(line)
        return 0

    if not sys.stdin.isatty():
        raise SystemExit("lazydirs needs an interactive terminal.")

    # Imported lazily: terminal control needs termios, which the non-interactive commands do not.
    from .runtime.app import run_history, run_sidebar

    if command == "history":
        selected = run_history(HistoryModal(HistorySource(load_history_command())), args.exclude, theme)
    else:
        selected = run_sidebar(SidebarDirectories(SidebarSources.default(pinned_path)), theme)
    if selected is None:
        return 1
    print(selected)
    return 0
