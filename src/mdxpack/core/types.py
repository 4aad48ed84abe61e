"""
Core type definitions for mdxpack.

Source files, sealed batches and the artifacts written for them.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .errors import FileSystemError


class SourceFile(BaseModel):
    """
    A documentation file found under the scan root.

    ``path`` is the path as discovered (``root / relative``) and is what the
    provenance header prints. Content is read on demand and never cached.
    """
    path: Path
    root: Path
    suffix: str = ".mdx"

    model_config = ConfigDict(frozen=True)

    @property
    def stem(self) -> str:
        """File name with the target suffix removed."""
        name = self.path.name
        if self.suffix and name.endswith(self.suffix) and name != self.suffix:
            return name[: -len(self.suffix)]
        return name

    @property
    def relative_dir(self) -> Path:
        """Containing directory relative to the scan root (``.`` for the root itself)."""
        return self.path.parent.relative_to(self.root)

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FileSystemError(f"Cannot read {self.path}: {e}", path=self.path) from e


class Batch(BaseModel):
    """
    A sealed group of source files destined for one output artifact.
    """
    index: int
    files: List[SourceFile] = Field(default_factory=list)
    content: str = ""
    word_count: int = 0
    # Relative source directory; only set by directory-grouped planning.
    group: Path | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def stems(self) -> List[str]:
        return [f.stem for f in self.files]

    def __len__(self) -> int:
        return len(self.files)


class OutputArtifact(BaseModel):
    """One file to be written: a name relative to the output directory and its text."""
    name: str
    content: str
    batch_index: int

    model_config = ConfigDict(frozen=True)


class PackSummary(BaseModel):
    """
    Structured result of a pack run.
    """
    source: str
    output_dir: str
    policy: str
    files_found: int
    artifacts_written: int
    total_words: int
    artifact_paths: List[str] = Field(default_factory=list)
    duration_sec: float = 0.0
