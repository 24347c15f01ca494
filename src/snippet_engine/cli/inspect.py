"""Inspect CLI command."""

import argparse
from pathlib import Path


def cmd_inspect(args: argparse.Namespace) -> int:
    from snippet_engine.markup.document import (
        count_snippets,
        count_snippets_for_task,
        parse_document,
    )
    from snippet_engine.markup.syntax import build_syntax_tree, format_tree
    from snippet_engine.numbering import parse_optional
    from snippet_engine.transform.folder import read_source

    text = read_source(Path(args.file))
    doc = parse_document(text)
    task = parse_optional(args.task)

    print(f"\n  {args.file}")
    print(f"  {'─' * max(len(args.file), 40)}")
    print(f"  Snippets:      {count_snippets(doc)}")
    if task is not None:
        print(f"  In task {str(task) + ':':<6}{count_snippets_for_task(doc, task)}")

    if doc.snippets:
        print(f"\n  {'#':<4} {'Task':<8} {'Variants':<36} {'Live':<16}")
        print(f"  {'─' * 64}")
    for i, snippet in enumerate(doc.snippets, 1):
        task_str = str(snippet.task) if snippet.task else "-"
        kinds = ", ".join(k.tag_name for k in snippet.present_kinds()) or "-"
        live = snippet.live_kind.tag_name if snippet.live_kind else "-"
        print(f"  {i:<4} {task_str:<8} {kinds:<36} {live:<16}")

    if args.tree:
        print("\n  Syntax tree:")
        for line in format_tree(build_syntax_tree(text)).splitlines():
            print(f"    {line}")
    print()
    return 0
