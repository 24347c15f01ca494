"""Transform module: apply snippet rendering to whole folders."""

from snippet_engine.transform.backup import snapshot_tree
from snippet_engine.transform.folder import FolderResult, FolderTransformer, transform_file, transform_folder

__all__ = ["FolderResult", "FolderTransformer", "snapshot_tree", "transform_file", "transform_folder"]
