"""Exception types raised by the snippet engine."""

from __future__ import annotations

from pathlib import Path


class FormatError(ValueError):
    """Marked-up source text violates the snippet markup rules.

    Raised for unbalanced or misnamed markers, unexpected tags, nested tags
    inside a variant, ambiguous active variants, comment markers that cannot
    be removed, and malformed task numbers. Processing of the document stops
    at the first defect.
    """


class FileTransformationError(RuntimeError):
    """A single file could not be transformed during a folder run."""

    def __init__(self, path: Path | str, cause: Exception | None = None):
        self.path = str(path)
        self.cause = cause
        if cause is None:
            message = f'Error during transformation of file "{self.path}".'
        else:
            message = f'Error during transformation of file "{self.path}": {cause}'
        super().__init__(message)
