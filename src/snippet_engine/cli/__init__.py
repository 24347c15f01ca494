"""Command-line interface for snippet-engine.

Usage:
    snippet transform <folder> --mode {solution|student|full-solution|full-student}
                      [--target DIR] [--task N[.N[.N]]] [--only-transformed]
                      [--special] [--extensions ".cs .java"] [--backup-dir DIR] [--dry-run]
    snippet render <file> --mode X [--task N] [--special] [--output FILE]
    snippet inspect <file> [--task N] [--tree]
    snippet settings show
    snippet settings set-extensions ".cs .java"
    snippet settings set-backup-dir <dir>
"""

import argparse
import logging
import sys

import yaml

from snippet_engine.cli.inspect import cmd_inspect
from snippet_engine.cli.settings import (
    cmd_settings_set_backup_dir,
    cmd_settings_set_extensions,
    cmd_settings_show,
)
from snippet_engine.cli.transform import cmd_render, cmd_transform
from snippet_engine.markup.render import OutputMode

MODE_CHOICES = [m.value for m in OutputMode]


def _add_render_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--mode", required=True, choices=MODE_CHOICES,
        help="Output mode",
    )
    p.add_argument(
        "--task", default=None,
        help="Reveal solutions up to this task (e.g. 2 or 2.3.1)",
    )
    p.add_argument(
        "--special", action="store_true",
        help="Prefer specialsolution blocks where present",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippet",
        description="Maintain student and solution variants in one source file",
    )
    parser.add_argument(
        "--settings", default=None,
        help="Path to settings.yaml",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # transform
    tr = sub.add_parser("transform", help="Transform every matching file in a folder")
    tr.add_argument("folder", help="Source folder")
    _add_render_options(tr)
    tr.add_argument(
        "--target", default=None,
        help="Output folder (required for solution and student modes)",
    )
    tr.add_argument(
        "--only-transformed", action="store_true",
        help="Do not copy files without relevant snippets to the target",
    )
    tr.add_argument(
        "--extensions", default=None,
        help='Space-separated extension filter, e.g. ".cs .java"',
    )
    tr.add_argument(
        "--backup-dir", default=None,
        help="Directory receiving the source snapshot",
    )
    tr.add_argument(
        "--dry-run", action="store_true",
        help="Report without writing",
    )

    # render
    rd = sub.add_parser("render", help="Render a single file")
    rd.add_argument("file", help="Source file")
    _add_render_options(rd)
    rd.add_argument(
        "--output", default=None,
        help="Write to this file instead of stdout",
    )

    # inspect
    ins = sub.add_parser("inspect", help="Summarize the snippets in a file")
    ins.add_argument("file", help="Source file")
    ins.add_argument(
        "--task", default=None,
        help="Also count snippets belonging to this task",
    )
    ins.add_argument(
        "--tree", action="store_true",
        help="Print the syntax tree",
    )

    # settings
    st = sub.add_parser("settings", help="Persisted settings")
    st_sub = st.add_subparsers(dest="subcommand")
    st_sub.add_parser("show", help="Show current settings")
    ext = st_sub.add_parser("set-extensions", help="Set the extension filter")
    ext.add_argument("extensions", help='Space-separated extensions, e.g. ".cs .java"')
    bak = st_sub.add_parser("set-backup-dir", help="Set the backup directory")
    bak.add_argument("directory")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dispatch = {
        ("transform", ""): cmd_transform,
        ("render", ""): cmd_render,
        ("inspect", ""): cmd_inspect,
        ("settings", "show"): cmd_settings_show,
        ("settings", "set-extensions"): cmd_settings_set_extensions,
        ("settings", "set-backup-dir"): cmd_settings_set_backup_dir,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if not handler:
        parser.parse_args([args.command, "--help"])
        return 0

    try:
        return handler(args)
    except (ValueError, RuntimeError, OSError, yaml.YAMLError) as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
