"""
mdxpack - Repack documentation trees into a few large files.

mdxpack scans a directory for documentation files (``.mdx`` by default)
and concatenates them into a small number of larger Markdown files, each
source file prefixed with a provenance header. The result is easy to feed
to tools that limit how many files, or how large a file, they accept.

Key Components:
- core.collector: Recursive discovery of source files
- core.planner: Size-bounded and directory-grouped batching
- core.naming: Output file names derived from batch contents
- core.writer: Output directory reset and artifact writes
- core.packer: End-to-end orchestration

Usage:
    from mdxpack import Packer, SizeBounded

    summary = Packer().run("docs", SizeBounded(threshold=5000))
"""

__version__ = "0.1.0"

from .config import PackConfig, load_config
from .core.errors import ConfigError, FileSystemError, MdxpackError
from .core.packer import Packer
from .core.planner import plan
from .core.policy import DirectoryGrouped, SizeBounded, parse_policy
from .core.types import Batch, OutputArtifact, PackSummary, SourceFile

__all__ = [
    "__version__",
    "Batch",
    "ConfigError",
    "DirectoryGrouped",
    "FileSystemError",
    "MdxpackError",
    "OutputArtifact",
    "PackConfig",
    "PackSummary",
    "Packer",
    "SizeBounded",
    "SourceFile",
    "load_config",
    "parse_policy",
    "plan",
]
