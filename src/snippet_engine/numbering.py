"""Hierarchical task numbers: ``major[.minor[.subminor]]``.

Snippets carry an optional ``task`` attribute such as ``2`` or ``2.3.1``.
Two comparisons drive the transformation:

- :meth:`HierarchicalNumber.in_or_before`: is a snippet's task at or before
  a cutoff? Used to decide whether its solution is revealed.
- :meth:`HierarchicalNumber.in_task`: does a snippet belong to a task or one
  of its subtasks? Used to count relevant snippets.

A level that is absent on either side matches anything. An absent number
(``None``) matches every cutoff and every task, see :func:`in_or_before` and
:func:`in_task`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from snippet_engine.errors import FormatError

# One decimal digit per level, up to three levels
_NUMBER_RE = re.compile(r"(?P<major>[0-9])(?:\.(?P<minor>[0-9])(?:\.(?P<subminor>[0-9]))?)?")


@dataclass(frozen=True)
class HierarchicalNumber:
    """Immutable version identifier with one to three levels."""

    major: int
    minor: int | None = None
    subminor: int | None = None

    def __post_init__(self) -> None:
        if self.subminor is not None and self.minor is None:
            raise ValueError("subminor level requires a minor level")
        for level in (self.major, self.minor, self.subminor):
            if level is not None and level < 0:
                raise ValueError(f"hierarchical number levels must be non-negative, got {level}")

    @classmethod
    def parse(cls, text: str) -> HierarchicalNumber:
        """Parse a hierarchical number from its textual form.

        The input must contain exactly one occurrence of the number pattern,
        so ``"12"`` and ``"1.2.3.4"`` are rejected.

        Raises:
            FormatError: If the text does not hold exactly one number.
        """
        matches = list(_NUMBER_RE.finditer(text))
        if len(matches) != 1:
            raise FormatError(f'Cannot parse hierarchical number from "{text}"')
        m = matches[0]
        minor = m.group("minor")
        subminor = m.group("subminor")
        return cls(
            major=int(m.group("major")),
            minor=int(minor) if minor is not None else None,
            subminor=int(subminor) if subminor is not None else None,
        )

    @property
    def levels(self) -> tuple[int, ...]:
        return tuple(v for v in (self.major, self.minor, self.subminor) if v is not None)

    def format(self) -> str:
        return ".".join(str(v) for v in self.levels)

    def __str__(self) -> str:
        return self.format()

    def in_or_before(self, other: HierarchicalNumber) -> bool:
        """True if this number lies at or before *other*.

        Every level is checked on its own: a level greater than the cutoff's
        rules the number out, even when an earlier level is smaller. So
        ``1.5`` is not at or before ``2.1``. Once either side runs out of
        levels the numbers are treated as matching.
        """
        for mine, theirs in zip(self._padded(), other._padded()):
            if mine is None or theirs is None:
                return True
            if mine > theirs:
                return False
        return True

    def in_task(self, other: HierarchicalNumber) -> bool:
        """True if this number equals *other* on every level both define."""
        for mine, theirs in zip(self._padded(), other._padded()):
            if mine is None or theirs is None:
                return True
            if mine != theirs:
                return False
        return True

    def _padded(self) -> tuple[int | None, int | None, int | None]:
        return (self.major, self.minor, self.subminor)


def parse_optional(text: str | None) -> HierarchicalNumber | None:
    """Parse *text*, treating ``None`` and blank strings as "no number"."""
    if text is None or not text.strip():
        return None
    return HierarchicalNumber.parse(text)


def in_or_before(task: HierarchicalNumber | None, cutoff: HierarchicalNumber | None) -> bool:
    """Is *task* at or before *cutoff*? Absent numbers always match."""
    if task is None or cutoff is None:
        return True
    return task.in_or_before(cutoff)


def in_task(task: HierarchicalNumber | None, wanted: HierarchicalNumber | None) -> bool:
    """Does *task* belong to *wanted* or one of its subtasks? Absent numbers always match."""
    if task is None or wanted is None:
        return True
    return task.in_task(wanted)
