"""
Name Synthesizer - Output file names for sealed batches.

Size-bounded batches are named after up to the first three stems they
contain plus their 1-based sequence number (``intro_setup_faq_1.md``).
Directory-grouped batches are named after their source directory
(``guides.md``). Names are flat: no directory components.
"""

import logging
import re
from pathlib import Path

from .types import Batch

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def sanitize_name(name: str) -> str:
    """Replace everything but ASCII letters and digits with ``_`` and lowercase."""
    return _UNSAFE_CHARS.sub("_", name).lower()


class NameSynthesizer:
    """
    Derives artifact names from batch contents.
    """

    def __init__(
        self,
        output_extension: str = ".md",
        fallback_prefix: str = "concatenated",
        max_stems: int = 3,
        root_name: str = "root",
    ):
        self.output_extension = output_extension
        self.fallback_prefix = fallback_prefix
        self.max_stems = max_stems
        # Used for files sitting directly in the scan root.
        self.root_name = root_name

    @classmethod
    def from_config(cls, config, source_root: Path | str) -> "NameSynthesizer":
        root_name = Path(source_root).resolve().name or "root"
        return cls(
            output_extension=config.output_extension,
            fallback_prefix=config.fallback_prefix,
            max_stems=config.max_name_stems,
            root_name=root_name,
        )

    def name_for(self, batch: Batch) -> str:
        if batch.group is not None:
            return self._directory_name(batch.group)

        stems = batch.stems[: self.max_stems]
        if not stems:
            logger.warning(f"Batch {batch.index} has no files; using fallback name")
            return f"{self.fallback_prefix}_{batch.index}{self.output_extension}"

        combined = "_".join(sanitize_name(stem) for stem in stems)
        return f"{combined}_{batch.index}{self.output_extension}"

    def _directory_name(self, group: Path) -> str:
        base = group.name or self.root_name
        return f"{sanitize_name(base)}{self.output_extension}"
