"""
Output Writer - Materializes artifacts on disk.

Writes are plain overwrites with no temp-file-and-rename step; a crash
mid-write can leave a truncated artifact behind.
"""

import logging
import shutil
from pathlib import Path

from .errors import FileSystemError
from .types import OutputArtifact

logger = logging.getLogger(__name__)


def reset_output_dir(output_dir: Path | str) -> Path:
    """
    Delete ``output_dir`` and recreate it empty.

    Failure to delete (most commonly because the directory does not exist
    yet) is ignored. Failure to create is not.
    """
    output_dir = Path(output_dir)
    try:
        shutil.rmtree(output_dir)
    except OSError as e:
        logger.debug(f"Could not clear {output_dir}: {e}")

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(
            f"Cannot create output directory {output_dir}: {e}", path=output_dir
        ) from e
    return output_dir


def write_artifact(output_dir: Path | str, artifact: OutputArtifact) -> Path:
    """
    Write ``artifact`` beneath ``output_dir``, creating parent directories.

    Returns:
        Path: The path that was written.
    """
    target = Path(output_dir) / artifact.name
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Cannot write {target}: {e}", path=target) from e

    logger.debug(f"Wrote {len(artifact.content)} characters to {target}")
    return target
