"""Render a parsed document in one of four output modes.

Extraction modes (``SOLUTION``, ``STUDENT_VERSION``) emit only the active
variant of each snippet, de-commented, with all markers removed. Full-markup
modes re-emit every marker and toggle comment state in place so that only
the active variant is live code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from snippet_engine.markup.document import Document, Snippet, TextRegion
from snippet_engine.markup.syntax import COMMENT_MARKER
from snippet_engine.markup.variants import VariantKind
from snippet_engine.numbering import HierarchicalNumber


class OutputMode(Enum):
    SOLUTION = "solution"
    STUDENT_VERSION = "student"
    FULL_WITH_ACTIVE_SOLUTION = "full-solution"
    FULL_WITH_ACTIVE_STUDENT_VERSION = "full-student"

    @property
    def full_markup(self) -> bool:
        return self in (OutputMode.FULL_WITH_ACTIVE_SOLUTION, OutputMode.FULL_WITH_ACTIVE_STUDENT_VERSION)

    @property
    def wants_solution(self) -> bool:
        return self in (OutputMode.SOLUTION, OutputMode.FULL_WITH_ACTIVE_SOLUTION)


@dataclass(frozen=True)
class Activation:
    """Which variant of a snippet is active. Exactly one flag is set."""

    student: bool
    solution: bool
    special_solution: bool

    @property
    def kind(self) -> VariantKind:
        if self.special_solution:
            return VariantKind.SPECIAL_SOLUTION
        if self.solution:
            return VariantKind.SOLUTION
        return VariantKind.STUDENT

    def is_active(self, kind: VariantKind) -> bool:
        return kind is self.kind


def activation_for(
    snippet: Snippet,
    mode: OutputMode,
    task_cutoff: HierarchicalNumber | None = None,
    prefer_special_solution: bool = False,
) -> Activation:
    """Decide the active variant of *snippet* for the given options."""
    solution_wanted = mode.wants_solution and snippet.in_or_before(task_cutoff)
    special = (
        VariantKind.SPECIAL_SOLUTION in snippet.variants
        and prefer_special_solution
        and solution_wanted
    )
    solution = solution_wanted and not special
    return Activation(
        student=not solution and not special,
        solution=solution,
        special_solution=special,
    )


def render_snippet(
    snippet: Snippet,
    mode: OutputMode,
    task_cutoff: HierarchicalNumber | None = None,
    prefer_special_solution: bool = False,
) -> str:
    active = activation_for(snippet, mode, task_cutoff, prefer_special_solution)
    indent = snippet.indentation

    if not mode.full_markup:
        variant = snippet.variant(active.kind)
        if variant is None:
            return ""
        return variant.render(want_uncommented=True, indentation=indent)

    parts = [f"{COMMENT_MARKER}<snippet"]
    if snippet.task is not None:
        parts.append(f' task="{snippet.task}"')
    parts.append(">\n")
    for kind in snippet.present_kinds():
        variant = snippet.variants[kind]
        parts += [
            indent, f"{COMMENT_MARKER}<{kind.tag_name}>\n",
            indent, variant.render(active.is_active(kind), indent), "\n",
            indent, f"{COMMENT_MARKER}</{kind.tag_name}>\n",
        ]
    parts += [indent, f"{COMMENT_MARKER}</snippet>"]
    return "".join(parts)


def render_document(
    doc: Document,
    mode: OutputMode,
    task_cutoff: HierarchicalNumber | None = None,
    prefer_special_solution: bool = False,
) -> str:
    """Render *doc* into a single string, nodes in original order.

    Raises:
        FormatError: If a comment marker cannot be removed from a line.
    """
    out: list[str] = []
    for node in doc.nodes:
        if isinstance(node, TextRegion):
            out.append(node.text(doc.source))
        else:
            out.append(render_snippet(node, mode, task_cutoff, prefer_special_solution))
    return "".join(out)
