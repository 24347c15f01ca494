"""Variant kinds and per-variant content.

A snippet holds up to three alternative blocks. Each block is stored as its
original lines; whether the block is currently live code is derived from the
lines themselves.
"""

from __future__ import annotations

import re
from enum import Enum

from snippet_engine.errors import FormatError
from snippet_engine.markup.syntax import COMMENT_MARKER

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class VariantKind(Enum):
    """The closed set of variant tags, in rendering order."""

    STUDENT = "student"
    SOLUTION = "solution"
    SPECIAL_SOLUTION = "specialsolution"

    @property
    def tag_name(self) -> str:
        return self.value


# Declared order is observable in full-markup output
VARIANT_KINDS: tuple[VariantKind, ...] = (
    VariantKind.STUDENT,
    VariantKind.SOLUTION,
    VariantKind.SPECIAL_SOLUTION,
)
VARIANT_TAGS: frozenset[str] = frozenset(k.tag_name for k in VARIANT_KINDS)


def first_non_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


def is_live_line(line: str, first: int) -> bool:
    """A non-blank line that does not start with the comment marker.

    A remainder shorter than the marker cannot be a comment, so a single
    stray character counts as live code.
    """
    # Short lines such as "}" or "x;" are live; only a leading "//" marks a comment.
    if first >= len(line):
        return False
    return line[first:first + len(COMMENT_MARKER)] != COMMENT_MARKER


class Variant:
    """Lines of one variant block plus its derived comment state."""

    def __init__(self, lines: list[str] | tuple[str, ...] = ()):
        self.lines: tuple[str, ...] = tuple(lines)
        self.first_non_whitespace: tuple[int, ...] = tuple(
            first_non_whitespace(line) for line in self.lines
        )
        self.has_uncommented_lines: bool = any(
            is_live_line(line, first)
            for line, first in zip(self.lines, self.first_non_whitespace)
        )

    @classmethod
    def from_block(cls, block: str) -> Variant:
        """Build a variant from raw block text, trimming whitespace at both ends."""
        trimmed = block.strip()
        if not trimmed:
            return cls()
        return cls(_LINE_BREAK_RE.split(trimmed))

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        state = "live" if self.has_uncommented_lines else "commented"
        return f"Variant({len(self.lines)} lines, {state})"

    def render(self, want_uncommented: bool, indentation: str = "") -> str:
        """Render the block as live code or as comments.

        Comments are only added to a live block and only removed from a
        commented one; a block already in the wanted state is emitted as is.
        Blank lines keep their whitespace and never gain or lose a marker.

        Raises:
            FormatError: If a marker must be removed from a line that lacks one.
        """
        add_comments = not want_uncommented and self.has_uncommented_lines
        remove_comments = want_uncommented and not self.has_uncommented_lines

        out: list[str] = []
        for line, first in zip(self.lines, self.first_non_whitespace):
            leading, content = line[:first], line[first:]
            if not content:
                out.append(leading)
            elif add_comments:
                if leading.startswith(indentation):
                    out.append(indentation + COMMENT_MARKER + leading[len(indentation):] + content)
                else:
                    out.append(leading + COMMENT_MARKER + content)
            elif remove_comments:
                if not content.startswith(COMMENT_MARKER):
                    raise FormatError(f'Cannot remove comment from line "{line}".')
                out.append(leading + content[len(COMMENT_MARKER):])
            else:
                out.append(line)
        return "\n".join(out)
