"""
Path Collector - Recursive discovery of source files.

Walks a directory tree depth-first and returns every file whose extension
matches the target suffix exactly. Entries are visited in the order the
operating system lists them unless sorting is requested, so two runs on
different filesystems can discover the same files in a different order.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List

from .errors import FileSystemError
from .types import SourceFile

logger = logging.getLogger(__name__)


def collect_paths(
    root: Path | str, suffix: str, sort_entries: bool = False
) -> List[Path]:
    """
    Return the paths of all files under ``root`` ending in ``suffix``.

    Args:
        root: Directory to scan.
        suffix: Extension including the leading dot (``.mdx``). Case-sensitive.
        sort_entries: Visit directory entries sorted by name instead of in
            listing order.

    Returns:
        Matching paths in depth-first discovery order, each built as
        ``root / <relative path>``.

    Raises:
        FileSystemError: If ``root`` or any directory beneath it cannot be listed.
    """
    root = Path(root)
    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        raise FileSystemError(f"Cannot scan directory {root}: {e}", path=root) from e

    if sort_entries:
        entries.sort(key=lambda entry: entry.name)

    matches: List[Path] = []
    for entry in entries:
        entry_path = root / entry.name
        if entry.is_dir(follow_symlinks=False):
            matches.extend(collect_paths(entry_path, suffix, sort_entries))
        elif os.path.splitext(entry.name)[1] == suffix:
            matches.append(entry_path)

    logger.debug(f"{root}: {len(matches)} matching files")
    return matches


def load_source_files(
    root: Path | str, paths: Iterable[Path], suffix: str
) -> List[SourceFile]:
    """Wrap collected paths as SourceFile records bound to their scan root."""
    root = Path(root)
    return [SourceFile(path=path, root=root, suffix=suffix) for path in paths]
