"""Folder transformation: walks a source tree and transforms matching files.

The process:
1. Snapshot the source tree into the backup directory
2. Walk every file below the source folder
3. Parse and render files whose extension passes the filter
4. In extraction modes, copy everything else to the target tree

Each file is rendered completely in memory before it is written, so a
malformed file never leaves partial output behind. The first failing file
aborts the run.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from snippet_engine.errors import FileTransformationError
from snippet_engine.markup.document import count_snippets, count_snippets_for_task, parse_document
from snippet_engine.markup.render import OutputMode, render_document
from snippet_engine.numbering import HierarchicalNumber
from snippet_engine.paths import backup_dir
from snippet_engine.transform.backup import snapshot_tree

logger = logging.getLogger(__name__)


@dataclass
class FolderResult:
    """Outcome of a folder transformation run."""

    transformed: list[str] = field(default_factory=list)
    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    backup: str | None = None
    dry_run: bool = False

    def summary(self) -> str:
        lines = ["Folder Transformation Results", "─" * 40]
        lines.append(f"  Transformed: {len(self.transformed)}")
        lines.append(f"  Copied:      {len(self.copied)}")
        lines.append(f"  Skipped:     {len(self.skipped)}")
        if self.backup:
            lines.append(f"  Backup:      {self.backup}")
        if self.dry_run:
            lines.append("\n[DRY RUN] No files were modified.")
        return "\n".join(lines)


def read_source(path: Path) -> str:
    # newline="" keeps \r\n intact
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_output(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def transform_file(
    source: Path,
    target: Path,
    mode: OutputMode,
    task_cutoff: HierarchicalNumber | None = None,
    prefer_special_solution: bool = False,
    dry_run: bool = False,
) -> bool:
    """Transform one file into *target*.

    Returns:
        True if the file was transformed, False if it held no relevant snippets.

    Raises:
        FormatError: If the file's markup is malformed.
    """
    doc = parse_document(read_source(source))

    if count_snippets(doc) == 0:
        return False
    if mode is OutputMode.SOLUTION and count_snippets_for_task(doc, task_cutoff) == 0:
        return False

    output = render_document(doc, mode, task_cutoff, prefer_special_solution)
    if not dry_run:
        write_output(target, output)
    return True


class FolderTransformer:
    """Transforms every matching file in a folder.

    Remembers the last folder it processed so that repeated runs on the same
    folder do not overwrite the original snapshot.
    """

    def __init__(self, backup_root: Path | str | None = None):
        self.backup_root = Path(backup_root) if backup_root else backup_dir()
        self._last_folder: Path | None = None

    def transform_folder(
        self,
        folder: Path | str,
        mode: OutputMode,
        extensions: list[str] | set[str],
        target: Path | str | None = None,
        task_cutoff: HierarchicalNumber | None = None,
        only_transformed: bool = False,
        prefer_special_solution: bool = False,
        dry_run: bool = False,
    ) -> FolderResult:
        """Transform all files in *folder*.

        Args:
            folder: Source folder, processed recursively.
            mode: Output mode. Extraction modes write to *target*; full-markup
                modes rewrite files in place.
            extensions: Suffixes to transform, including the leading dot.
            target: Output folder for extraction modes.
            task_cutoff: Reveal solutions up to this task. In solution mode,
                files without snippets in this task count as untransformed.
            only_transformed: In extraction modes, skip copying files that
                were not transformed.
            prefer_special_solution: Use ``specialsolution`` blocks where present.
            dry_run: Report without writing or backing up.

        Raises:
            ValueError: If the folders are missing or conflict.
            FileTransformationError: If a file cannot be transformed.
        """
        src = Path(folder).expanduser().resolve()
        if not src.is_dir():
            raise ValueError(f"The directory {folder} does not exist.")

        extracting = not mode.full_markup
        dest: Path | None = None
        if extracting:
            if target is None:
                raise ValueError("No output folder is provided for transformation.")
            dest = Path(target).expanduser().resolve()
            if dest == src:
                raise ValueError("The source and target directories cannot be the same.")

        result = FolderResult(dry_run=dry_run)

        files = sorted(p for p in src.rglob("*") if p.is_file())

        if not dry_run:
            if src != self._last_folder:
                result.backup = str(snapshot_tree(src, self.backup_root))
            self._last_folder = src
            if dest is not None:
                dest.mkdir(parents=True, exist_ok=True)

        filters = set(extensions)
        copy_untransformed = extracting and not only_transformed

        for path in files:
            out_path = dest / path.relative_to(src) if dest is not None else path
            if dest is not None and out_path.exists() and not dry_run:
                out_path.unlink()

            transformed = False
            if path.suffix in filters:
                try:
                    transformed = transform_file(
                        path, out_path, mode, task_cutoff, prefer_special_solution, dry_run,
                    )
                except Exception as exc:
                    raise FileTransformationError(path, exc) from exc

            if transformed:
                logger.debug("Transformed %s", path)
                result.transformed.append(str(path))
            elif copy_untransformed:
                if not dry_run:
                    out_path.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copyfile(path, out_path)
                result.copied.append(str(path))
            else:
                result.skipped.append(str(path))

        logger.info(
            "Transformed %d file(s) in %s (%d copied, %d skipped)",
            len(result.transformed), src, len(result.copied), len(result.skipped),
        )
        return result


def transform_folder(
    folder: Path | str,
    mode: OutputMode,
    extensions: list[str] | set[str],
    target: Path | str | None = None,
    task_cutoff: HierarchicalNumber | None = None,
    only_transformed: bool = False,
    prefer_special_solution: bool = False,
    backup_root: Path | str | None = None,
    dry_run: bool = False,
) -> FolderResult:
    """One-shot folder transformation with a fresh :class:`FolderTransformer`."""
    transformer = FolderTransformer(backup_root)
    return transformer.transform_folder(
        folder,
        mode,
        extensions,
        target=target,
        task_cutoff=task_cutoff,
        only_transformed=only_transformed,
        prefer_special_solution=prefer_special_solution,
        dry_run=dry_run,
    )
