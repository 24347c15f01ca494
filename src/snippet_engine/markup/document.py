"""Semantic document model.

Interprets the syntax tree into a flat sequence of :class:`TextRegion` spans
and :class:`Snippet` units. Only ``snippet`` tags are allowed at top level,
and a snippet may only contain the fixed variant tags.

    //<snippet task="2">
    //<student>
    // TODO: call code()
    //</student>
    //<solution>
    code();
    //</solution>
    //</snippet>

At most one variant of a snippet may hold live (uncommented) code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from snippet_engine.errors import FormatError
from snippet_engine.markup.syntax import TagNode, TerminalNode, build_syntax_tree
from snippet_engine.markup.variants import VARIANT_KINDS, VARIANT_TAGS, Variant, VariantKind
from snippet_engine.numbering import HierarchicalNumber, in_or_before, in_task

SNIPPET_TAG = "snippet"
TASK_ATTRIBUTE = "task"


@dataclass(frozen=True)
class TextRegion:
    """Text outside any snippet, copied verbatim on render."""

    begin: int
    length: int

    def text(self, source: str) -> str:
        return source[self.begin:self.begin + self.length]


@dataclass
class Snippet:
    """A markup-delimited block with up to three alternative variants."""

    indentation: str = ""
    task: HierarchicalNumber | None = None
    variants: dict[VariantKind, Variant] = field(default_factory=dict)

    def variant(self, kind: VariantKind) -> Variant | None:
        return self.variants.get(kind)

    def present_kinds(self) -> list[VariantKind]:
        return [k for k in VARIANT_KINDS if k in self.variants]

    @property
    def live_kind(self) -> VariantKind | None:
        """The variant holding uncommented code in the source, if any."""
        for kind in self.present_kinds():
            if self.variants[kind].has_uncommented_lines:
                return kind
        return None

    def in_or_before(self, cutoff: HierarchicalNumber | None) -> bool:
        return in_or_before(self.task, cutoff)

    def in_task(self, task: HierarchicalNumber | None) -> bool:
        return in_task(self.task, task)


SemanticNode = Union[TextRegion, Snippet]


@dataclass
class Document:
    """A parsed source text. Rebuilt from scratch for every parse."""

    source: str
    nodes: list[SemanticNode] = field(default_factory=list)

    @property
    def snippets(self) -> list[Snippet]:
        return [n for n in self.nodes if isinstance(n, Snippet)]


def parse_document(text: str) -> Document:
    """Parse *text* into a :class:`Document`.

    Raises:
        FormatError: On any structural defect in the markup.
    """
    tree = build_syntax_tree(text)
    doc = Document(source=text)

    for node in tree.nodes:
        if isinstance(node, TerminalNode):
            doc.nodes.append(TextRegion(node.begin, node.length))
            continue
        if node.tag_name != SNIPPET_TAG:
            raise FormatError(f"Did not expect tag {node.tag_name} here.")
        doc.nodes.append(_build_snippet(text, node))

    return doc


def count_snippets(doc: Document) -> int:
    return len(doc.snippets)


def count_snippets_for_task(doc: Document, task: HierarchicalNumber | None) -> int:
    """Count snippets that belong to *task* or one of its subtasks."""
    return sum(1 for s in doc.snippets if s.in_task(task))


def _build_snippet(text: str, tag: TagNode) -> Snippet:
    snippet = Snippet(indentation=_indentation_before(text, tag.open_begin))

    raw_task = tag.attributes.get(TASK_ATTRIBUTE)
    if raw_task is not None:
        try:
            snippet.task = HierarchicalNumber.parse(raw_task)
        except FormatError as exc:
            raise FormatError(f"Error parsing hierarchical number from {raw_task}.") from exc

    for kind in VARIANT_KINDS:
        variant = _extract_variant(text, tag, kind)
        if variant is not None:
            snippet.variants[kind] = variant

    unexpected = [c.tag_name for c in tag.child_tags() if c.tag_name not in VARIANT_TAGS]
    if unexpected:
        raise FormatError(
            f"The snippet tag contains invalid subtags: {', '.join(unexpected)}."
        )

    live = [k for k in snippet.present_kinds() if snippet.variants[k].has_uncommented_lines]
    if len(live) > 1:
        raise FormatError(
            "More than one subsnippet has uncommented lines: "
            f"{', '.join(k.tag_name for k in live)}."
        )

    return snippet


def _extract_variant(text: str, tag: TagNode, kind: VariantKind) -> Variant | None:
    child = tag.find_child(kind.tag_name)
    if child is None or not child.children:
        return None
    if len(child.children) > 1 or not isinstance(child.children[0], TerminalNode):
        raise FormatError(f"The {kind.tag_name} tag may not have nested tags.")
    return Variant.from_block(child.children[0].text(text))


def _indentation_before(text: str, index: int) -> str:
    """Horizontal whitespace directly preceding *index* on the same line."""
    start = index
    while start > 0 and text[start - 1].isspace() and text[start - 1] not in "\r\n":
        start -= 1
    return text[start:index]
