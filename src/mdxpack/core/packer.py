"""
Packer - Orchestrates a full pack run.

Resets the output directory, collects source files, plans batches and
writes one artifact per batch. Every run rebuilds the output set from
scratch; nothing is carried over from a previous run.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Set

from ..config import PackConfig
from .collector import collect_paths, load_source_files
from .errors import MdxpackError
from .naming import NameSynthesizer
from .planner import iter_batches
from .policy import BatchingPolicy
from .types import Batch, OutputArtifact, PackSummary
from .writer import reset_output_dir, write_artifact

logger = logging.getLogger(__name__)


class Packer:
    """
    Central orchestrator for pack runs.
    """

    def __init__(self, config: PackConfig | None = None):
        self.config = config or PackConfig()

    def run(
        self,
        source: Path | str,
        policy: BatchingPolicy,
        progress_callback: Callable[[Path, Batch], None] | None = None,
    ) -> PackSummary:
        """
        Pack every matching file under ``source`` into the output directory.

        Args:
            source: Directory to scan.
            policy: Batching policy for the whole run.
            progress_callback: Called with the written path and its batch
                after each artifact is written.

        Returns:
            PackSummary: Counts and paths for the run.

        Raises:
            FileSystemError: On any scan, read or write failure.
            MdxpackError: If the output directory would overwrite the source tree.
        """
        start_time = time.perf_counter()
        source_root = Path(source)
        output_dir = self.config.output_dir
        self._check_output_dir(source_root, output_dir)

        reset_output_dir(output_dir)

        paths = collect_paths(
            source_root,
            self.config.source_extension,
            sort_entries=self.config.sort_entries,
        )
        files = load_source_files(source_root, paths, self.config.source_extension)
        logger.info(f"Found {len(files)} {self.config.source_extension} files under {source_root}")

        namer = NameSynthesizer.from_config(self.config, source_root)
        written: List[Path] = []
        seen_names: Set[str] = set()
        total_words = 0

        for batch in iter_batches(files, policy):
            artifact = OutputArtifact(
                name=namer.name_for(batch),
                content=batch.content,
                batch_index=batch.index,
            )
            if artifact.name in seen_names:
                logger.warning(
                    f"Output name {artifact.name} repeats; batch {batch.index} overwrites an earlier artifact"
                )
            seen_names.add(artifact.name)

            path = write_artifact(output_dir, artifact)
            written.append(path)
            total_words += batch.word_count

            if progress_callback:
                progress_callback(path, batch)

        return PackSummary(
            source=str(source_root),
            output_dir=str(output_dir),
            policy=policy.describe(),
            files_found=len(files),
            artifacts_written=len(written),
            total_words=total_words,
            artifact_paths=[str(p) for p in written],
            duration_sec=round(time.perf_counter() - start_time, 2),
        )

    @staticmethod
    def _check_output_dir(source_root: Path, output_dir: Path) -> None:
        """Refuse output directories that would delete the tree being scanned."""
        source_abs = source_root.resolve()
        output_abs = output_dir.resolve()
        if output_abs == source_abs or output_abs in source_abs.parents:
            raise MdxpackError(
                f"Output directory {output_dir} contains the source directory {source_root}"
            )
