"""Markup core: scan, parse and render snippet markup in source text."""

from snippet_engine.markup.document import (
    Document,
    Snippet,
    TextRegion,
    count_snippets,
    count_snippets_for_task,
    parse_document,
)
from snippet_engine.markup.render import Activation, OutputMode, activation_for, render_document
from snippet_engine.markup.syntax import SyntaxTree, build_syntax_tree, format_tree
from snippet_engine.markup.variants import Variant, VariantKind

__all__ = [
    "Activation",
    "Document",
    "OutputMode",
    "Snippet",
    "SyntaxTree",
    "TextRegion",
    "Variant",
    "VariantKind",
    "activation_for",
    "build_syntax_tree",
    "count_snippets",
    "count_snippets_for_task",
    "format_tree",
    "parse_document",
    "render_document",
]
