"""Transform and render CLI commands."""

import argparse
import sys
from pathlib import Path

from snippet_engine.markup.render import OutputMode
from snippet_engine.numbering import parse_optional
from snippet_engine.settings import load_settings, parse_extensions


def cmd_transform(args: argparse.Namespace) -> int:
    from snippet_engine.transform.folder import transform_folder

    settings = load_settings(args.settings)
    mode = OutputMode(args.mode)
    extensions = parse_extensions(args.extensions) if args.extensions else settings.extensions
    backup_root = args.backup_dir or settings.backup_dir

    result = transform_folder(
        args.folder,
        mode,
        extensions,
        target=args.target,
        task_cutoff=parse_optional(args.task),
        only_transformed=args.only_transformed,
        prefer_special_solution=args.special or settings.prefer_special_solution,
        backup_root=backup_root,
        dry_run=args.dry_run,
    )

    print(result.summary())
    if args.verbose:
        for path in result.transformed:
            print(f"  ~ {path}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    from snippet_engine.markup.document import parse_document
    from snippet_engine.markup.render import render_document
    from snippet_engine.transform.folder import read_source, write_output

    settings = load_settings(args.settings)
    doc = parse_document(read_source(Path(args.file)))
    output = render_document(
        doc,
        OutputMode(args.mode),
        parse_optional(args.task),
        args.special or settings.prefer_special_solution,
    )

    if args.output:
        write_output(Path(args.output), output)
        print(f"  Wrote {args.output}")
    else:
        sys.stdout.write(output)
    return 0
