"""Tag scanner and syntax tree builder.

Markers live in line comments:

    //<name key="value">   opening marker (no trailing ``/``)
    //</name>              closing marker

Opening and closing markers are matched independently, then paired with a
stack in a single left-to-right walk. Text between markers becomes
:class:`TerminalNode` spans into the original text; the tree has no single
root.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from snippet_engine.errors import FormatError

COMMENT_MARKER = "//"

_OPEN_TAG_RE = re.compile(r"//<(?P<tag>\w+)(?P<attributes>[^>]*?)(?<!/)>")
_CLOSE_TAG_RE = re.compile(r"//</(?P<tag>\w+)>")
_ATTRIBUTE_RE = re.compile(r'\b(?P<key>\w+)\b="(?P<value>.*?)"')


@dataclass(frozen=True)
class TerminalNode:
    """A run of plain text: the half-open span ``[begin, begin + length)``."""

    begin: int
    length: int

    @property
    def end(self) -> int:
        return self.begin + self.length

    def text(self, source: str) -> str:
        return source[self.begin:self.end]


@dataclass
class TagNode:
    """A matched pair of opening and closing markers with its children."""

    tag_name: str
    open_begin: int
    open_length: int
    close_begin: int = -1
    close_length: int = 0
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[SyntaxNode] = field(default_factory=list)

    def child_tags(self) -> list[TagNode]:
        return [c for c in self.children if isinstance(c, TagNode)]

    def find_child(self, tag_name: str) -> TagNode | None:
        """Return the first direct child tag named *tag_name*."""
        for child in self.child_tags():
            if child.tag_name == tag_name:
                return child
        return None


SyntaxNode = Union[TerminalNode, TagNode]


@dataclass
class SyntaxTree:
    """Ordered forest of top-level nodes."""

    nodes: list[SyntaxNode] = field(default_factory=list)


def parse_attributes(region: str) -> dict[str, str]:
    """Extract ``key="value"`` pairs. Later duplicates overwrite earlier ones."""
    return {m.group("key"): m.group("value") for m in _ATTRIBUTE_RE.finditer(region)}


def build_syntax_tree(text: str) -> SyntaxTree:
    """Scan *text* for markers and build the syntax tree.

    Raises:
        FormatError: If the opening and closing marker counts differ, or a
            closing marker does not close the innermost open tag.
    """
    openings = list(_OPEN_TAG_RE.finditer(text))
    closings = list(_CLOSE_TAG_RE.finditer(text))

    if len(openings) != len(closings):
        raise FormatError(
            f"There are {len(openings)} opening tags but {len(closings)} closing tags."
        )

    tree = SyntaxTree()
    stack: list[TagNode] = []
    last_text = 0
    next_open = 0
    next_close = 0
    end = len(text)

    while next_open < len(openings) or next_close < len(closings):
        open_pos = openings[next_open].start() if next_open < len(openings) else end
        close_pos = closings[next_close].start() if next_close < len(closings) else end
        position = min(open_pos, close_pos)

        siblings = stack[-1].children if stack else tree.nodes
        if position > last_text:
            siblings.append(TerminalNode(last_text, position - last_text))

        if open_pos < close_pos:
            match = openings[next_open]
            next_open += 1
            tag = TagNode(
                tag_name=match.group("tag"),
                open_begin=match.start(),
                open_length=match.end() - match.start(),
                attributes=parse_attributes(match.group("attributes")),
            )
            siblings.append(tag)
            stack.append(tag)
            last_text = match.end()
        else:
            match = closings[next_close]
            next_close += 1
            name = match.group("tag")
            if not stack:
                raise FormatError(
                    f"Encountered a closing tag of {name} but expected no closing tag."
                )
            if stack[-1].tag_name != name:
                raise FormatError(
                    f"Encountered a closing tag of {name} but expected a closing tag "
                    f"of {stack[-1].tag_name}."
                )
            tag = stack.pop()
            tag.close_begin = match.start()
            tag.close_length = match.end() - match.start()
            last_text = match.end()

    if end > last_text:
        tree.nodes.append(TerminalNode(last_text, end - last_text))

    return tree


def format_tree(tree: SyntaxTree) -> str:
    """Render an indented outline of the tree, two spaces per level."""
    lines: list[str] = []

    def walk(node: SyntaxNode, depth: int) -> None:
        pad = "  " * depth
        if isinstance(node, TagNode):
            lines.append(f"{pad}{node.tag_name}")
            for child in node.children:
                walk(child, depth + 1)
        else:
            lines.append(f"{pad}Content of length {node.length}")

    for node in tree.nodes:
        walk(node, 0)
    return "\n".join(lines)
