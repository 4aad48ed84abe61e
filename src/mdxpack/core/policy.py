"""
Batching Policies.

A run is planned under exactly one policy, chosen once from the command
line: either size-bounded (close a batch once its word count reaches a
threshold) or directory-grouped (one batch per source directory).
"""

import re
from dataclasses import dataclass
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .result import Err, Ok, Result

FOLDER_KEYWORD = "folder"

# Leading integer prefix, the same leniency as ``parseInt("300abc") == 300``.
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class SizeBounded(BaseModel):
    """Accumulate files until the running word count reaches ``threshold``."""
    kind: Literal["size"] = "size"
    threshold: PositiveInt

    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        return f"size-bounded ({self.threshold} words)"


class DirectoryGrouped(BaseModel):
    """One batch per source directory, regardless of size."""
    kind: Literal["folder"] = "folder"

    model_config = ConfigDict(frozen=True)

    def describe(self) -> str:
        return "directory-grouped"


BatchingPolicy = Annotated[
    Union[SizeBounded, DirectoryGrouped], Field(discriminator="kind")
]


@dataclass
class PolicyParseError:
    """Structured error for an unusable batching argument."""
    message: str
    token: str


def parse_policy(
    token: str | None, default_threshold: int
) -> Result[BatchingPolicy, PolicyParseError]:
    """
    Turn the optional second CLI argument into a batching policy.

    Args:
        token: The raw argument, or None when it was not given.
        default_threshold: Threshold used when no argument is given.

    Returns:
        Ok(policy) for an absent argument, ``folder`` or a positive integer;
        Err(PolicyParseError) for anything else.
    """
    if token is None or token == "":
        return Ok(SizeBounded(threshold=default_threshold))

    if token == FOLDER_KEYWORD:
        return Ok(DirectoryGrouped())

    match = _LEADING_INT.match(token)
    if match is None:
        return Err(PolicyParseError(
            f"Expected a positive word count or '{FOLDER_KEYWORD}', got {token!r}",
            token,
        ))

    threshold = int(match.group(1))
    if threshold <= 0:
        return Err(PolicyParseError(
            f"Word count must be positive, got {threshold}", token
        ))

    return Ok(SizeBounded(threshold=threshold))
