"""
Batch Planner.

Decides which source files are packed together. Both policies share the
same provenance rendering and word counting; they differ only in when a
batch is closed:

- SizeBounded: after each file, close the batch once its running word
  count has reached the threshold. Whatever is left when the input runs
  out becomes the final (possibly undersized) batch.
- DirectoryGrouped: one batch per source directory relative to the scan
  root, keyed in first-seen order.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from .policy import BatchingPolicy, DirectoryGrouped, SizeBounded
from .types import Batch, SourceFile

logger = logging.getLogger(__name__)

PROVENANCE_RULE = "-----------------"


def render_block(source: SourceFile, content: str | None = None) -> str:
    """
    Render one file as a provenance block.

    The content is read from disk unless given explicitly.
    """
    text = source.read_text() if content is None else content
    return f"{PROVENANCE_RULE}\nFILE PATH: {source.path}\n\n{text}\n\n"


def count_words(text: str) -> int:
    """Count whitespace-separated tokens. An approximation, not a linguistic word count."""
    return len(text.split())


class _BatchBuilder:
    """Accumulator for the batch currently being filled."""

    def __init__(self, group: Path | None = None):
        self.group = group
        self.files: List[SourceFile] = []
        self.word_count = 0
        self._blocks: List[str] = []

    def add(self, source: SourceFile) -> None:
        block = render_block(source)
        self.files.append(source)
        self._blocks.append(block)
        self.word_count += count_words(block)

    def is_empty(self) -> bool:
        return not self.files

    def seal(self, index: int) -> Batch:
        batch = Batch(
            index=index,
            files=list(self.files),
            content="".join(self._blocks),
            word_count=self.word_count,
            group=self.group,
        )
        logger.debug(
            f"Sealed batch {index}: {len(batch)} files, {batch.word_count} words"
        )
        return batch


def iter_batches(
    files: Iterable[SourceFile], policy: BatchingPolicy
) -> Iterator[Batch]:
    """
    Yield sealed batches in emission order.

    Size-bounded batches are yielded as soon as they close, so only one
    batch's content is held in memory at a time.
    """
    if isinstance(policy, SizeBounded):
        return _iter_size_bounded(files, policy.threshold)
    if isinstance(policy, DirectoryGrouped):
        return _iter_directory_grouped(files)
    raise TypeError(f"Unsupported batching policy: {policy!r}")


def plan(files: Iterable[SourceFile], policy: BatchingPolicy) -> List[Batch]:
    """Plan every batch for ``files`` under ``policy``."""
    return list(iter_batches(files, policy))


def _iter_size_bounded(files: Iterable[SourceFile], threshold: int) -> Iterator[Batch]:
    index = 1
    current = _BatchBuilder()

    for source in files:
        current.add(source)
        if current.word_count >= threshold:
            yield current.seal(index)
            index += 1
            current = _BatchBuilder()

    # Input exhausted: flush the remainder, if any, as the final batch.
    if not current.is_empty():
        yield current.seal(index)


def _iter_directory_grouped(files: Iterable[SourceFile]) -> Iterator[Batch]:
    groups: Dict[Path, _BatchBuilder] = {}

    for source in files:
        key = source.relative_dir
        if key not in groups:
            groups[key] = _BatchBuilder(group=key)
        groups[key].add(source)

    for index, builder in enumerate(groups.values(), start=1):
        yield builder.seal(index)
